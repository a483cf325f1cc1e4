#################################################################################
# Header names
# Names are matched case-insensitively; these values set the casing used
# when a header is added rather than copied from an exchange.

# SET_COOKIE is used for cookie lines synthesised from structured response cookies
SET_COOKIE = "Set-Cookie"

# CONTENT_TYPE is parsed into a MediaType when reading OperationResponse headers
CONTENT_TYPE = "Content-Type"

# CONTENT_LENGTH is refreshed when a response is re-created with new content
CONTENT_LENGTH = "Content-Length"


#################################################################################
# Body handling

# DEFAULT_CHARSET is used to decode bodies whose content type has no charset parameter
DEFAULT_CHARSET = "utf-8"

# DEFAULT_TEXT_CONTENT_TYPES are stored as text (rather than base64) in recordings
# Any "text/*" content type is also treated as text
DEFAULT_TEXT_CONTENT_TYPES = ["application/json", "application/text"]

# HEADER_ENCODING is the encoding for raw header bytes from ASGI and httpx responses
HEADER_ENCODING = "latin-1"
