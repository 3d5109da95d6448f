"""
Student Model
"""

from portal.extensions import db
from portal.models.base import PersonMixin

YEAR_LEVELS = ('1', '2', '3', '4', '5', '6')


class Student(PersonMixin, db.Model):
    """Student account, keyed by studentID (nn-nnnn-nnnnnn)"""
    __tablename__ = 'students'

    KIND = 'student'
    KEY_ATTR = 'student_id'

    student_id = db.Column(db.String(14), unique=True, nullable=False, index=True)
    course = db.Column(db.String(50), nullable=False)
    section = db.Column(db.String(20), nullable=False)
    year_level = db.Column(db.String(2), nullable=False)

    JSON_FIELDS = dict(
        PersonMixin.JSON_FIELDS,
        student_id='studentID',
        course='course',
        section='section',
        year_level='yearLevel',
    )
    REQUIRED = PersonMixin.REQUIRED + ('student_id', 'course', 'section', 'year_level')

    def validate(self):
        errors = super().validate()
        if self.year_level and self.year_level not in YEAR_LEVELS:
            errors.append(f'yearLevel must be one of: {", ".join(YEAR_LEVELS)}.')
        return errors

    def summary(self):
        return {
            'fullName': self.full_name,
            'studentID': self.student_id,
            'email': self.email,
            'course': self.course,
            'section': self.section,
            'yearLevel': self.year_level,
        }

    def __repr__(self):
        return f'<Student {self.student_id}>'
