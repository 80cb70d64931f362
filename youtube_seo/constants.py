# ============================================================================
# PROVIDER MODELS
# ============================================================================
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"

# ============================================================================
# IMAGE GENERATION
# ============================================================================
THUMBNAIL_IMAGE_COUNT = 1  # One image per prompt variant
THUMBNAIL_MIME_TYPE = "image/png"
THUMBNAIL_ASPECT_RATIO = "16:9"
THUMBNAIL_DATA_URI_PREFIX = f"data:{THUMBNAIL_MIME_TYPE};base64,"

# ============================================================================
# CONTENT CONTRACT
# ============================================================================
SEO_SCORE_MIN = 0
SEO_SCORE_MAX = 100
EXPECTED_TITLE_COUNT = 3
EXPECTED_TAG_RANGE = (10, 15)
TAGS_COPY_SEPARATOR = ", "

# ============================================================================
# ORCHESTRATION TIMING
# ============================================================================
INTERSTITIAL_SECONDS = 2.5  # Cosmetic pause between loading and results
COPY_CONFIRMATION_SECONDS = 2.0  # Copy checkmark is shown for 2s, then reverts

# ============================================================================
# SESSIONS
# ============================================================================
MAX_SESSIONS = 256  # Least recently used idle sessions are evicted beyond this

# ============================================================================
# SEO SCORE GAUGE
# ============================================================================
# Bands: >= 75 high, [40, 75) medium, < 40 low
SCORE_HIGH_THRESHOLD = 75
SCORE_MEDIUM_THRESHOLD = 40
SCORE_GAUGE_SIZE = 120  # px
SCORE_GAUGE_STROKE_WIDTH = 10  # px
SCORE_BAND_COLORS = {
    "high": "#22c55e",
    "medium": "#facc15",
    "low": "#ef4444",
}

# ============================================================================
# DOWNLOADS
# ============================================================================
MAX_FILENAME_STEM_LENGTH = 100

# ============================================================================
# USER-FACING MESSAGES
# ============================================================================
EMPTY_TOPIC_MESSAGE = "Please enter a video topic."
TEXT_FAILURE_MESSAGE = "Failed to generate text content. Please try again."
THUMBNAIL_FAILURE_MESSAGE = "Failed to generate thumbnail image. Please try again."
UNKNOWN_FAILURE_MESSAGE = "An unknown error occurred."
LOADING_MESSAGE = "Generating content, please wait..."
INTERSTITIAL_MESSAGE = "Almost there, polishing your results..."
