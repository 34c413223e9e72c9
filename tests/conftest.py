"""
Shared fixtures.
"""

import pytest


@pytest.fixture(scope="session")
def chart_engine():
    """
    Skip chart rasterization tests when plotly's static image engine
    (kaleido and its browser) is not available on this machine.
    """
    import plotly.graph_objects as go
    import plotly.io as pio

    try:
        pio.to_image(go.Figure(go.Bar(y=[1])), format="png", width=40, height=40)
    except (ValueError, RuntimeError, OSError) as e:
        pytest.skip(f"static image export unavailable: {e}")
