"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model (also used as JWT claim names)"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD_HASH = "password_hash"
    
    # JWT standard subject claim carries the user ID
    TOKEN_SUBJECT = "sub"
