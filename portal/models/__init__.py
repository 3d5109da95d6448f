"""
Models Package

Exports all models for easy importing.
"""

from portal.models.base import ACCOUNT_STATUSES, ACTIVE
from portal.models.student import Student
from portal.models.professor import Professor
from portal.models.admin import Admin

__all__ = ['Student', 'Professor', 'Admin', 'ACCOUNT_STATUSES', 'ACTIVE']
