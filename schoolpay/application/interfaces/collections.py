"""Collection names passed to the RecordStore.

Document stores create collections on the first write, so these constants
are the whole schema. Services use them so names stay consistent.
"""

COLLECTION_USERS = "users"
COLLECTION_ORGANIZATIONS = "organizations"
# Fees live in "payments" (name used by the existing mobile client data).
COLLECTION_FEES = "payments"
COLLECTION_TRANSACTIONS = "transactions"
COLLECTION_SUPPORT = "support"
COLLECTION_MESSAGES = "messages"
