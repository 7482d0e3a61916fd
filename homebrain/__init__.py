"""
HomeBrain - voice and chat command interpretation for family coordination.
"""

import logging

# Quiet per-request client logging
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)

__version__ = "0.1.0"

from homebrain.commands import classify, respond

__all__ = ["classify", "respond", "__version__"]
