"""Central configuration for the facebox client.

All tunable parameters are defined here with descriptive names.
The client and the fbx command line read their defaults from this module.
"""

# =============================================================================
# SERVICE ADDRESS
# =============================================================================

# Default box address used by the command line when --addr is not given
FACEBOX_ADDR = "http://localhost:8080"

# Timeout in seconds applied to every request (None disables it)
HTTP_TIMEOUT_SECONDS = 60

# =============================================================================
# ENDPOINTS
# =============================================================================

# Legacy endpoint: one flat list of matches across all faces
SIMILAR_PATH = "/facebox/similar"

# Multi-face endpoint: matches grouped per detected face
SIMILARS_PATH = "/facebox/similars"

# =============================================================================
# REQUEST ENCODING
# =============================================================================

ACCEPT_JSON = "application/json; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Multipart field and filename used when posting raw image bytes
IMAGE_FIELD = "file"
IMAGE_FILENAME = "image.dat"

# =============================================================================
# SIMILARITY SEARCH
# =============================================================================

# Per-face match cap used when the caller passes a limit below 1
SIMILARS_DEFAULT_LIMIT = 5
