"""Application services: one per entity, each over a RecordStore."""

from schoolpay.application.services.fees import FeeService
from schoolpay.application.services.messages import MessageService
from schoolpay.application.services.organizations import OrganizationService
from schoolpay.application.services.support import SupportService
from schoolpay.application.services.transactions import TransactionService
from schoolpay.application.services.users import UserService

__all__ = [
    "FeeService",
    "MessageService",
    "OrganizationService",
    "SupportService",
    "TransactionService",
    "UserService",
]
