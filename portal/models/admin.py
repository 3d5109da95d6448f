"""
Admin Model
"""

from portal.extensions import db
from portal.models.base import PersonMixin


class Admin(PersonMixin, db.Model):
    """Administrator account, keyed by employeeID (A-...)"""
    __tablename__ = 'admins'

    KIND = 'admin'
    KEY_ATTR = 'employee_id'

    employee_id = db.Column(db.String(30), unique=True, nullable=False, index=True)
    contact_number = db.Column(db.String(30), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    designation = db.Column(db.String(100), nullable=False)
    employment_status = db.Column(db.String(50), nullable=False)
    role = db.Column(db.String(50), nullable=False)
    created_by = db.Column(db.String(100), nullable=False)

    JSON_FIELDS = dict(
        PersonMixin.JSON_FIELDS,
        employee_id='employeeID',
        contact_number='contactNumber',
        department='department',
        designation='designation',
        employment_status='employmentStatus',
        role='role',
        created_by='createdBy',
    )
    REQUIRED = PersonMixin.REQUIRED + (
        'employee_id', 'contact_number', 'department', 'designation',
        'employment_status', 'role', 'created_by',
    )

    def summary(self):
        return {
            'fullName': self.full_name,
            'employeeID': self.employee_id,
            'email': self.email,
            'department': self.department,
            'designation': self.designation,
            'role': self.role,
        }

    def __repr__(self):
        return f'<Admin {self.employee_id}>'
