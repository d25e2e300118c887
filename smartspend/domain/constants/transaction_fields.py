"""Constants for Transaction model field names"""


class TransactionFields:
    """Field name constants for Transaction documents"""
    ID = "id"
    USER = "user"  # ObjectId reference to users._id
    TYPE = "type"
    CATEGORY = "category"
    AMOUNT = "amount"
    DESCRIPTION = "description"
    DATE = "date"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
