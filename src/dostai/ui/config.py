"""UI configuration constants.

Centralizes labels and timing values for the UI module.
"""

ASSISTANT_NAME = "Dost AI"
USER_LABEL = "You"

INPUT_PLACEHOLDER = f"Message {ASSISTANT_NAME}..."
DISCLAIMER = (
    f"{ASSISTANT_NAME} may produce inaccurate information. "
    "Consider verifying important information."
)

# Copy affordance labels
COPY_LABEL = "⧉ copy"
COPIED_LABEL = "✓ copied"

# Typing indicator animation
TYPING_FRAMES = ("●", "● ●", "● ● ●")
TYPING_FRAME_SECONDS = 0.4
