"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    AUTHOR = "author"
    CATEGORY = "category"
    SLUG = "slug"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Fields a client may change after creation
    MUTABLE = (TITLE, CONTENT, CATEGORY, SLUG)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
