"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD_HASH = "passwordHash"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
