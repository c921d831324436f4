import pytest


ROUND_TRIP_TEXTS = [
    "abcabcabcabc",
    "the cat and the hat and the bat sat on the mat",
    "To be, or not to be, that is the question: to be or not.",
    "hello world\nhello there\nhello again\n",
    "mississippi mississippi mississippi",
    "привет как дела привет как дела привет",
    "spaces     and more     spaces     here     and     there",
    "😊 hi 😊 hi 😊 hi 😊 hi",
]


@pytest.fixture(params=ROUND_TRIP_TEXTS)
def round_trip_text(request):
    return request.param


@pytest.fixture
def prose():
    return "the quick brown fox jumps over the lazy dog. " * 30
