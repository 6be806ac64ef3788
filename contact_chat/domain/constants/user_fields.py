"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    NAME = "name"
    SURNAME = "surname"
    EMAIL = "email"
    BIO = "bio"
    PASSWORD = "password"
    SESSION_SECRET = "session_secret"
    LAST_ACCESSED = "last_accessed"
    CONTACTS = "contacts"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
