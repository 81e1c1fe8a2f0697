"""
OncoGuide - cancer information toolkit.

Treatment cost estimation, comorbidity-adjusted survival statistics and
cancer catalogue helpers, with a Streamlit front end.
"""

__version__ = "0.1.0"

from oncoguide.results.costs import estimate
from oncoguide.model.survival import adjust_survival_rate

__all__ = ["estimate", "adjust_survival_rate", "__version__"]
