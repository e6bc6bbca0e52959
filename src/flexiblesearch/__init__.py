"""flexiblesearch: constants and a query DSL for the kotlinflexiblesearch extension.

:mod:`flexiblesearch.constants` exposes the extension's read-only constant
namespace; :mod:`flexiblesearch.core` renders FlexibleSearch queries with
bound parameters.
"""

from flexiblesearch.constants import EXTENSIONNAME
from flexiblesearch.version import __version__

__all__: list[str] = ["EXTENSIONNAME", "__version__"]
