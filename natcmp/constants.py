"""Constants for natcmp - digit classes."""

# Digit classification modes accepted by CompareConfig.digits
# "ascii": only 0-9, "unicode": every Unicode decimal digit (category Nd)
DIGIT_MODES = ("ascii", "unicode")

ASCII_DIGITS = "0123456789"
