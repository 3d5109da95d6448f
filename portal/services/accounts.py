"""
Account Store

Kind-tagged repositories over the Student, Professor and Admin tables behind
one interface. Administrative lookups walk REPOSITORIES in order until one
kind matches.
"""

import logging
import re

from sqlalchemy.exc import IntegrityError

from portal.errors import DuplicateKeyError, NotFoundError, ValidationError
from portal.extensions import db
from portal.models import Admin, Professor, Student, ACCOUNT_STATUSES

logger = logging.getLogger(__name__)

ADMIN = Admin.KIND
PROFESSOR = Professor.KIND
STUDENT = Student.KIND

# sqlite: "UNIQUE constraint failed: students.email"
# postgres: 'Key (email)=(x@y.z) already exists.'
_DUPLICATE_COLUMN_PATTERNS = (
    re.compile(r'UNIQUE constraint failed: \w+\.(\w+)'),
    re.compile(r'Key \((\w+)\)='),
)


class AccountRepository:
    """Lookup and mutation of one account kind."""

    def __init__(self, model):
        self.model = model
        self.kind = model.KIND
        self.key_attr = model.KEY_ATTR

    def find_all(self):
        return self.model.query.order_by(self.model.last_name, self.model.first_name).all()

    def find_by_id(self, record_id):
        return db.session.get(self.model, record_id)

    def find_by_key(self, key):
        return self.model.query.filter(getattr(self.model, self.key_attr) == key).first()

    def find_by_email(self, email):
        return self.model.query.filter(self.model.email == email).first()

    def find_by_ref(self, ref):
        """Match either the internal record id or the business key."""
        return self.find_by_id(ref) or self.find_by_key(ref)

    def add(self, record):
        db.session.add(record)
        commit_or_raise_duplicate(record)
        return record

    def save(self, record):
        commit_or_raise_duplicate(record)
        return record

    def set_status(self, record, status):
        record.account_status = status
        db.session.commit()
        logger.info('Account %s %s set to %s', self.kind, record.business_key, status)
        return record

    def delete(self, record):
        """Delete `record` and return its business key."""
        key = record.business_key
        db.session.delete(record)
        db.session.commit()
        logger.info('Account %s %s deleted', self.kind, key)
        return key

    def __repr__(self):
        return f'<AccountRepository {self.kind}>'


REPOSITORIES = (
    AccountRepository(Admin),
    AccountRepository(Professor),
    AccountRepository(Student),
)


def get_repository(kind):
    for repository in REPOSITORIES:
        if repository.kind == kind:
            return repository
    raise KeyError(kind)


def commit_or_raise_duplicate(record):
    """Commit the session, turning a unique violation into DuplicateKeyError."""
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        column = _duplicate_column(exc)
        if column is None:
            raise DuplicateKeyError('Duplicate key.') from exc
        field = record.json_key(column)
        raise DuplicateKeyError(
            f'{field} already exists.',
            field=field,
            details={field: getattr(record, column, None)},
        ) from exc


def _duplicate_column(exc):
    message = str(exc.orig)
    for pattern in _DUPLICATE_COLUMN_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group(1)
    return None


def normalize_status(status):
    """Canonical spelling of an account status, case-insensitively."""
    for candidate in ACCOUNT_STATUSES:
        if isinstance(status, str) and status.strip().lower() == candidate.lower():
            return candidate
    raise ValidationError(
        'Invalid account status.',
        details=[f'accountStatus must be one of: {", ".join(ACCOUNT_STATUSES)}.'],
    )


def tagged(record):
    data = record.to_dict()
    data['type'] = record.KIND
    return data


def list_accounts():
    """Every account across all kinds, each tagged with its kind."""
    return [tagged(record) for repository in REPOSITORIES for record in repository.find_all()]


def find_account(ref):
    """First (repository, record) matching `ref` in REPOSITORIES order."""
    for repository in REPOSITORIES:
        record = repository.find_by_ref(ref)
        if record is not None:
            return repository, record
    raise NotFoundError('Account not found')


def update_account_status(ref, status):
    repository, record = find_account(ref)
    return repository.set_status(record, normalize_status(status))


def delete_account(ref):
    """Delete the account matching `ref`; returns its (kind, business key)."""
    repository, record = find_account(ref)
    return repository.kind, repository.delete(record)
