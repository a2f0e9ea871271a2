"""Limits for AI-generated card batches."""

# Number of cards requested from the provider
TARGET_GENERATED_CARDS = 20
# Accepted batch size, wide enough to absorb provider variance
MIN_GENERATED_CARDS = 15
MAX_GENERATED_CARDS = 25
# Generated fronts are kept shorter than hand-written ones
MAX_GENERATED_FRONT_LENGTH = 500
# Shorter descriptions do not give the model enough to work with
MIN_DESCRIPTION_LENGTH_FOR_GENERATION = 10
