"""Tests for the questionary-backed prompter."""

from unittest.mock import MagicMock, patch

import pytest

from create_shipkit_app import catalog
from create_shipkit_app.errors import AbortedError
from create_shipkit_app.prompts import QuestionaryPrompter, is_secret


def answering(value):
    """A questionary question whose ``ask()`` returns ``value``."""
    question = MagicMock()
    question.ask.return_value = value
    return MagicMock(return_value=question)


@pytest.fixture
def prompter():
    return QuestionaryPrompter()


def test_secret_detection():
    assert is_secret("STRIPE_SECRET_KEY")
    assert is_secret("RESEND_API_KEY")
    assert is_secret("database_password")
    assert not is_secret("NEXTAUTH_URL")


class TestQuestions:
    def test_project_name(self, prompter):
        with patch("questionary.text", answering("my-app")) as text:
            assert prompter.project_name("my-shipkit-app") == "my-app"

        assert text.call_args.kwargs["default"] == "my-shipkit-app"
        validate = text.call_args.kwargs["validate"]
        assert validate("my-app") is True
        assert "Invalid project name" in validate("My App")

    def test_features_preselects_template_defaults(self, prompter):
        available = catalog.get_available_features()
        with patch("questionary.checkbox", answering(["ui-shadcn"])) as checkbox:
            assert prompter.features(available, ["auth-nextauth"]) == ["ui-shadcn"]

        choices = checkbox.call_args.kwargs["choices"]
        checked = [choice.value for choice in choices if choice.checked]
        assert checked == ["auth-nextauth"]

    def test_env_vars_hide_secrets(self, prompter):
        with patch("questionary.text", answering(" http://localhost:3000 ")) as text, patch(
            "questionary.password", answering("s3cret")
        ) as password:
            values = prompter.env_vars(["NEXTAUTH_SECRET", "NEXTAUTH_URL"])

        assert values == {"NEXTAUTH_SECRET": "s3cret", "NEXTAUTH_URL": "http://localhost:3000"}
        assert password.call_count == 1
        assert text.call_count == 1

    def test_no_env_vars_no_questions(self, prompter):
        with patch("questionary.text") as text:
            assert prompter.env_vars([]) == {}
        text.assert_not_called()

    def test_confirm(self, prompter):
        with patch("questionary.confirm", answering(True)):
            assert prompter.confirm(MagicMock()) is True
        with patch("questionary.confirm", answering(False)):
            assert prompter.confirm(MagicMock()) is False


def test_cancelled_prompt_aborts(prompter):
    with patch("questionary.checkbox", answering(None)):
        with pytest.raises(AbortedError):
            prompter.features(catalog.get_available_features(), [])
