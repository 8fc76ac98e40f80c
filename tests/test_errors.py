import copy
import pickle

from src.cards.errors import CardsError, DeckFileNotFound, LoadError


def test_load_error_message():
    e = LoadError("deck.bin", "permission denied")
    assert e.filename == "deck.bin"
    assert e.reason == "permission denied"
    assert str(e) == "Error loading 'deck.bin': permission denied"
    assert isinstance(e, CardsError)


def test_load_error_pickles():
    e = pickle.loads(pickle.dumps(LoadError("f", "r")))
    assert type(e) is LoadError
    assert (e.filename, e.reason) == ("f", "r")


def test_file_not_found_pickles_and_copies():
    for e in (pickle.loads(pickle.dumps(DeckFileNotFound("f"))), copy.copy(DeckFileNotFound("f"))):
        assert type(e) is DeckFileNotFound
        assert e.reason == "file does not exist"
        assert str(e) == "Error loading 'f': file does not exist"
