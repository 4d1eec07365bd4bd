"""Client configuration constants.

The relay URL is fixed at build time; there is no runtime override.
"""

RELAY_URL = "http://localhost:5000"

# Seconds before an in-flight relay request is abandoned
REQUEST_TIMEOUT = 90.0

# How long the "copied" mark stays on a message
COPY_INDICATOR_SECONDS = 2.0

# Timestamp shown on each bubble (localized hour:minute)
TIMESTAMP_FORMAT = "%H:%M"

ERROR_REPLY = "Sorry, I couldn't reach Dost AI. Please try again."
