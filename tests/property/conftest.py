"""Hypothesis strategies for property-based testing."""

import numpy as np
from hypothesis import strategies as st


@st.composite
def generate_frame_size(draw, max_side=64):
    """Generate a random (width, height) pair."""
    width = draw(st.integers(min_value=1, max_value=max_side))
    height = draw(st.integers(min_value=1, max_value=max_side))
    return width, height


@st.composite
def generate_frame(draw, width, height):
    """Generate a random uint8 frame of the given size with 1, 3 or 4 channels."""
    channels = draw(st.sampled_from([1, 3, 4]))
    seed = draw(st.integers(min_value=0, max_value=2**32 - 1))
    rng = np.random.default_rng(seed)
    shape = (height, width) if channels == 1 else (height, width, channels)
    return rng.integers(0, 256, size=shape, dtype=np.uint8)
