"""
Tests for the Streamlit dashboard pages.
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

PAGES_DIR = Path(__file__).parent.parent / "ui" / "pages"


class TestAnalyticsPage:
    """Test the analytics page."""

    def test_analysis_message_survives_rerun(self):
        """The analysis result is shown after the page reruns."""
        at = AppTest.from_file(str(PAGES_DIR / "1_Analytics.py"), default_timeout=30)
        at.run()
        assert not at.exception
        assert len(at.success) == 0

        at.button[0].click().run()

        assert not at.exception
        assert at.success[0].value.startswith("Pipeline #1 health is now")
        assert at.session_state.network.get_pipeline(1).ai_analyzed
