"""Test error messages and their context."""

import pytest

from pwcheck.core.exceptions import PwcheckConfigError, PwcheckError, PwcheckInputError


class TestErrorMessages:
    """Context attributes are appended to the message in a fixed order."""

    def test_config_error_context(self):
        err = PwcheckConfigError("Bad value", config_path="policy.yml", section="sort_mode")
        assert str(err) == "Bad value (config: policy.yml) (section: sort_mode)"
        assert err.context() == (("config", "policy.yml"), ("section", "sort_mode"))

    def test_unset_context_is_omitted(self):
        assert str(PwcheckConfigError("Bad value", section="issue_mode")) == (
            "Bad value (section: issue_mode)"
        )
        assert str(PwcheckInputError("Malformed CSV")) == "Malformed CSV"

    def test_input_error_context(self):
        err = PwcheckInputError("Missing required columns: note.", source="export.csv")
        assert str(err) == "Missing required columns: note. (input: export.csv)"

    @pytest.mark.parametrize(
        "error,label",
        [
            (PwcheckConfigError("x"), "CONFIG ERROR"),
            (PwcheckInputError("x"), "INPUT ERROR"),
        ],
    )
    def test_labels(self, error, label):
        assert isinstance(error, PwcheckError)
        assert error.label == label
