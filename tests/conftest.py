"""Shared test configuration."""

import hypothesis

# First calls into torch kernels are slow enough to trip the default deadline.
hypothesis.settings.register_profile("torchcolor", deadline=None)
hypothesis.settings.load_profile("torchcolor")
