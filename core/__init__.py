"""
Job Profile Service Core Library.

This package provides the core functionality for the job-seeker profile
service: database management, models, repositories, the skill registry,
the blob store for uploaded assets, profile merge rules and logging.

Usage:
    # Database
    from core.db import db, get_db
    from core.models import User, UserProfile, Skill
    from core.repositories import ProfileRepository, UserRepository

    # Services
    from core.services import ProfileService, SkillRegistry
    from core.storage import BlobStore

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Lazy imports to avoid circular dependencies
# Users should import directly from submodules:
#   from core.db import db
#   from core.config import get_settings
#   from core.logging import get_logger
