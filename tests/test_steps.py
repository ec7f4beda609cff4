"""Tests for initializr.steps."""

from conftest import ScriptedPrompter

from initializr.errors import SchemaError
from initializr.resolver import ResolvedOptions
from initializr.schema import SchemaDocument
from initializr.state import AnswerSet
from initializr.steps import run_dependency_step, run_select_step, run_text_step


def _options() -> ResolvedOptions:
    return ResolvedOptions(ids=("jar", "war"), display_names=("Jar", "War"), default_index=1)


class TestSelectStep:
    def test_stores_selected_id(self) -> None:
        state = AnswerSet()
        prompter = ScriptedPrompter(selects=[0])
        assert run_select_step(prompter, state, "packaging", "Packaging:", _options) is True
        assert state.packaging == "jar"
        assert prompter.calls == [("select", "Packaging:", (["Jar", "War"], 1))]

    def test_cancel_returns_false(self) -> None:
        state = AnswerSet()
        assert run_select_step(ScriptedPrompter(selects=[None]), state, "packaging", "P:", _options) is False
        assert state.packaging == ""

    def test_schema_error_skips_step(self, capsys) -> None:
        def broken() -> ResolvedOptions:
            raise SchemaError("packaging", "missing from metadata")

        state = AnswerSet()
        prompter = ScriptedPrompter()
        assert run_select_step(prompter, state, "packaging", "Packaging:", broken) is True
        assert state.packaging == ""
        assert prompter.calls == []
        assert "packaging: missing from metadata" in capsys.readouterr().err


class TestTextStep:
    def test_empty_answer_accepted_literally(self) -> None:
        state = AnswerSet(description="preset")
        assert run_text_step(ScriptedPrompter(texts=[""]), state, "description", "Description:") is True
        assert state.description == ""

    def test_default_offered(self) -> None:
        state = AnswerSet()
        prompter = ScriptedPrompter()
        run_text_step(prompter, state, "group", "Group:", default="com.example")
        assert state.group == "com.example"
        assert prompter.calls == [("text", "Group:", "com.example")]

    def test_cancel_returns_false(self) -> None:
        assert run_text_step(ScriptedPrompter(texts=[None]), AnswerSet(), "name", "Name:") is False


class TestDependencyStep:
    def test_positions_deduped_in_menu_order(self, metadata) -> None:
        state = AnswerSet()
        prompter = ScriptedPrompter(checkbox=[3, 0, 3, 2])
        assert run_dependency_step(prompter, state, SchemaDocument(metadata)) is True
        assert state.dependencies == ["devtools", "web", "webflux"]

    def test_titles_and_groups(self, metadata) -> None:
        prompter = ScriptedPrompter()
        run_dependency_step(prompter, AnswerSet(), SchemaDocument(metadata))
        kind, _, (titles, groups) = prompter.calls[0]
        assert kind == "checkbox"
        assert titles[1] == "Lombok - Java annotation library"
        assert titles[0] == "Spring Boot DevTools"
        assert groups == ["Developer Tools", "Developer Tools", "Web", "Web"]

    def test_nothing_selected(self, metadata) -> None:
        state = AnswerSet()
        run_dependency_step(ScriptedPrompter(checkbox=[]), state, SchemaDocument(metadata))
        assert state.dependencies == []

    def test_no_dependencies_offered_skips_prompt(self, metadata, capsys) -> None:
        metadata["dependencies"]["values"] = []
        prompter = ScriptedPrompter()
        assert run_dependency_step(prompter, AnswerSet(), SchemaDocument(metadata)) is True
        assert prompter.calls == []
        assert "No dependencies offered" in capsys.readouterr().out

    def test_malformed_category_reported(self, metadata, capsys) -> None:
        metadata["dependencies"] = "oops"
        state = AnswerSet(dependencies=["stale"])
        assert run_dependency_step(ScriptedPrompter(), state, SchemaDocument(metadata)) is True
        assert state.dependencies == []
        assert "Skipping dependencies" in capsys.readouterr().err

    def test_cancel_returns_false(self, metadata) -> None:
        class Cancelling(ScriptedPrompter):
            def checkbox(self, message, choices, groups=None):
                return None

        assert run_dependency_step(Cancelling(), AnswerSet(), SchemaDocument(metadata)) is False
