# Validation errors (1000-1999)
INVALID_MEDIA_TYPE = 1001

# Not found errors (2000-2999)
MEDIA_FILE_NOT_FOUND = 2001

# Internal errors (8000-8999)
MISSING_TRANSPORT_RESPONSE = 8001
