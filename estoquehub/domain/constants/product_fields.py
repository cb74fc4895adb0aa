"""Constants for Product model field names (storage naming)"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    USER_ID = "user_id"
    NAME = "name"
    SKU = "sku"
    QUANTITY = "quantity"
    MIN_QUANTITY = "min_quantity"
    CATEGORY = "category"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
