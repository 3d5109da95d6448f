"""
Professor Model
"""

from portal.extensions import db
from portal.models.base import PersonMixin


class Professor(PersonMixin, db.Model):
    """Professor account, keyed by professorID (P-...)"""
    __tablename__ = 'professors'

    KIND = 'professor'
    KEY_ATTR = 'professor_id'

    professor_id = db.Column(db.String(30), unique=True, nullable=False, index=True)
    contact_number = db.Column(db.String(30), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    designation = db.Column(db.String(100), nullable=False)
    employment_status = db.Column(db.String(50), nullable=False)

    JSON_FIELDS = dict(
        PersonMixin.JSON_FIELDS,
        professor_id='professorID',
        contact_number='contactNumber',
        department='department',
        designation='designation',
        employment_status='employmentStatus',
    )
    REQUIRED = PersonMixin.REQUIRED + (
        'professor_id', 'contact_number', 'department', 'designation', 'employment_status',
    )

    def summary(self):
        return {
            'fullName': self.full_name,
            'professorID': self.professor_id,
            'email': self.email,
            'department': self.department,
            'designation': self.designation,
            'employmentStatus': self.employment_status,
        }

    def __repr__(self):
        return f'<Professor {self.professor_id}>'
