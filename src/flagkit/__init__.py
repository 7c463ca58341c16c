"""
flagkit – deterministic feature-flag resolution.

Import path convention::

    from flagkit.application.feature_flags import FlagCatalog, FlagService
    from flagkit.kernel.errors import UnknownFlagError
    from flagkit.config.settings import FlagSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
