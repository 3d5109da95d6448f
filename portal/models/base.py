"""
Shared columns and behaviour for the three account kinds.
"""

from datetime import datetime
import uuid

from portal.extensions import db

ACCOUNT_STATUSES = ('Active', 'Inactive', 'Suspended')
ACTIVE = 'Active'


def _new_id():
    return uuid.uuid4().hex


class PersonMixin:
    """Name, email, credential and status columns common to every account."""

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    last_name = db.Column(db.String(100), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    middle_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    account_status = db.Column(db.String(20), nullable=False, default=ACTIVE)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Column name -> JSON key, extended by each kind
    JSON_FIELDS = {
        'id': '_id',
        'last_name': 'lastName',
        'first_name': 'firstName',
        'middle_name': 'middleName',
        'email': 'email',
        'account_status': 'accountStatus',
    }
    REQUIRED = ('last_name', 'first_name', 'middle_name', 'email', 'password_hash')

    @property
    def full_name(self):
        return f'{self.last_name}, {self.first_name} {self.middle_name}'.strip()

    @property
    def business_key(self):
        return getattr(self, self.KEY_ATTR)

    @classmethod
    def json_key(cls, column):
        return cls.JSON_FIELDS.get(column, column)

    def validate(self):
        """Return every schema-level problem with this record."""
        errors = []
        for column in self.REQUIRED:
            if not getattr(self, column, None):
                errors.append(f'{self.json_key(column)} is required.')

        for column in self.__table__.columns:
            length = getattr(column.type, 'length', None)
            value = getattr(self, column.key, None)
            if length and isinstance(value, str) and len(value) > length:
                errors.append(f'{self.json_key(column.key)} must be at most {length} characters.')

        if self.account_status is not None and self.account_status not in ACCOUNT_STATUSES:
            errors.append(f'accountStatus must be one of: {", ".join(ACCOUNT_STATUSES)}.')
        return errors

    def to_dict(self):
        data = {json_key: getattr(self, column) for column, json_key in self.JSON_FIELDS.items()}
        data['fullName'] = self.full_name
        data['createdAt'] = self.created_at.isoformat() if self.created_at else None
        return data
