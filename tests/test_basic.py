"""Basic tests for the congol package."""

from congol import Game, PatternLibrary, Universe


def test_universe_creation():
    """Test basic universe creation and cell operations."""
    universe = Universe(10, 10)
    assert universe.width == 10
    assert universe.height == 10
    assert universe.get(0, 0) is False

    universe.set(5, 5, True)
    assert universe.get(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    game = Game(5, 5)
    assert game.universe.population == 0

    game.universe.set(2, 2, True)
    assert game.universe.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    patterns = PatternLibrary().list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_glider_run():
    """Test a glider keeps five cells while it travels."""
    game = Game(25, 25)
    PatternLibrary().get_pattern("Glider").apply_to_universe(game.universe, 2, 2)

    for _ in range(25):
        game.next_generation()
        assert game.universe.population == 5
