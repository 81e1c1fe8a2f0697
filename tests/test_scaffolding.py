"""Tests to verify project scaffolding is correct."""


def test_import_oncoguide():
    """Verify oncoguide package can be imported."""
    import oncoguide

    assert oncoguide.__version__ == "0.1.0"
    assert callable(oncoguide.estimate)
    assert callable(oncoguide.adjust_survival_rate)


def test_import_core_modules():
    """Verify core submodules can be imported."""
    from oncoguide import core
    from oncoguide.core import entities
    from oncoguide.core import tables
    from oncoguide.core import numeric

    assert core is not None
    assert entities is not None
    assert tables is not None
    assert numeric is not None


def test_import_model_modules():
    """Verify model submodules can be imported."""
    from oncoguide import model
    from oncoguide.model import survival
    from oncoguide.model import profile
    from oncoguide.model import catalogue

    assert model is not None
    assert survival is not None
    assert profile is not None
    assert catalogue is not None


def test_import_results_modules():
    """Verify results submodules can be imported."""
    from oncoguide import results
    from oncoguide.results import costs

    assert results is not None
    assert costs is not None


def test_import_dependencies():
    """Verify key dependencies are installed."""
    import numpy as np
    import pandas as pd
    import plotly

    assert np is not None
    assert pd is not None
    assert plotly is not None
