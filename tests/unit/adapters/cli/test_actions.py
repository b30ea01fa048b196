"""
Tests unitaires pour les actions du shell.

Tests couvrant:
- directedBy: validation du nom, en-tete, lignes numerotees, total
- releasedYearBy: validation de l'annee, requete avec un entier
- quit: message d'adieu et Outcome.TERMINATE
"""

import io

import pytest

from moviebuddy.adapters.cli.actions import ActionResult, CommandActions, Outcome
from moviebuddy.adapters.cli.parser import Command
from moviebuddy.core.exceptions import InvalidCommandArgumentsError


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def actions(mock_catalog, localizer, output) -> CommandActions:
    return CommandActions(mock_catalog, localizer, output)


def _lines(output: io.StringIO) -> list[str]:
    return output.getvalue().splitlines()


class TestActionResult:
    """Tests pour ActionResult."""

    def test_ok_defaults_to_continue(self):
        """ok() sans argument continue la boucle."""
        result = ActionResult.ok()
        assert result.outcome is Outcome.CONTINUE
        assert not result.failed

    def test_failure_continues_with_error(self):
        """failure() porte l'erreur et continue la boucle."""
        error = InvalidCommandArgumentsError()
        result = ActionResult.failure(error)
        assert result.failed
        assert result.error is error
        assert result.outcome is Outcome.CONTINUE


class TestTable:
    """Tests pour CommandActions.table()."""

    def test_binds_every_command(self, actions):
        """Chaque commande a exactement une action."""
        assert set(actions.table()) == set(Command)


class TestDirectedBy:
    """Tests pour l'action directedBy."""

    @pytest.mark.parametrize("arguments", [["directedBy"], ["directedBy", " "]])
    def test_blank_director_fails(self, actions, mock_catalog, output, arguments):
        """Un nom de realisateur vide echoue sans interroger le catalogue."""
        result = actions.directed_by(arguments)

        assert isinstance(result.error, InvalidCommandArgumentsError)
        assert result.outcome is Outcome.CONTINUE
        mock_catalog.directed_by.assert_not_called()
        assert output.getvalue() == ""

    def test_joins_remaining_tokens_as_director(self, actions, mock_catalog):
        """Les jetons apres la commande forment le nom, separes par un espace."""
        actions.directed_by(["directedBy", "Michael", "Bay"])

        mock_catalog.directed_by.assert_called_once_with("Michael Bay")

    def test_prints_header_rows_and_count(self, actions, output):
        """Deux films de Michael Bay : en-tete, lignes 1 et 2, total 2."""
        result = actions.directed_by(["directedBy", "Michael", "Bay"])

        lines = _lines(output)
        assert result == ActionResult.ok()
        assert lines[0] == "Movies directed by Michael Bay:"
        assert len(lines) == 4
        assert lines[1].startswith("1. title: Pearl Harbor")
        assert "releaseYear: 2001" in lines[1]
        assert "watchedDate: 2021-01-20" in lines[1]
        assert lines[2].startswith("2. title: Transformers: Age of Extinction")
        assert lines[3] == "2 movies found."

    def test_keeps_catalog_order(self, actions, mock_catalog, sample_movies, output):
        """Les resultats sont affiches dans l'ordre du catalogue."""
        mock_catalog.directed_by.side_effect = None
        mock_catalog.directed_by.return_value = list(reversed(sample_movies[:2]))

        actions.directed_by(["directedBy", "anyone"])

        lines = _lines(output)
        assert lines[1].startswith("1. title: Spectre")
        assert lines[2].startswith("2. title: Pearl Harbor")

    def test_no_match_prints_zero_count(self, actions, output):
        """Aucun resultat : en-tete puis total a zero."""
        actions.directed_by(["directedBy", "Nobody"])

        assert _lines(output) == ["Movies directed by Nobody:", "0 movies found."]


class TestReleasedYearBy:
    """Tests pour l'action releasedYearBy."""

    @pytest.mark.parametrize(
        "arguments",
        [["releasedYearBy"], ["releasedYearBy", "abc"], ["releasedYearBy", "20.15"]],
    )
    def test_invalid_year_fails(self, actions, mock_catalog, arguments):
        """Une annee absente ou non entiere echoue."""
        result = actions.released_year_by(arguments)

        assert isinstance(result.error, InvalidCommandArgumentsError)
        mock_catalog.released_year_by.assert_not_called()

    def test_queries_catalog_with_integer_year(self, actions, mock_catalog, output):
        """releasedYearBy 2015 interroge le catalogue avec l'entier 2015."""
        result = actions.released_year_by(["releasedYearBy", "2015"])

        assert not result.failed
        mock_catalog.released_year_by.assert_called_once_with(2015)
        lines = _lines(output)
        assert lines[0] == "Movies released in 2015:"
        assert lines[1].startswith("1. title: Spectre")
        assert lines[2].startswith("2. title: Mad Max: Fury Road")
        assert lines[-1] == "2 movies found."

    def test_extra_arguments_are_ignored(self, actions, mock_catalog):
        """Seul le premier argument est lu comme annee."""
        actions.released_year_by(["releasedYearBy", "2001", "extra"])

        mock_catalog.released_year_by.assert_called_once_with(2001)


class TestQuit:
    """Tests pour l'action quit."""

    def test_prints_farewell_and_terminates(self, actions, output):
        """quit affiche l'adieu et termine la boucle."""
        result = actions.quit(["quit"])

        assert result.outcome is Outcome.TERMINATE
        assert not result.failed
        assert _lines(output) == ["Bye, see you next time."]

    def test_ignores_arguments(self, actions):
        """Les arguments supplementaires n'empechent pas de quitter."""
        assert actions.quit(["quit", "now"]).outcome is Outcome.TERMINATE
