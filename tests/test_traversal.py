import itertools

import pytest

from cursorkit.traversal import Traversal, minimum_traversal


NAMES = [member.name for member in Traversal]


@pytest.mark.parametrize("name", NAMES)
def test_at_least_is_reflexive(name):
    category = Traversal[name]
    assert Traversal[name].at_least(category) is True


def test_random_access_is_at_least_bidirectional():
    assert Traversal.RANDOM_ACCESS.at_least(Traversal.BIDIRECTIONAL) is True


def test_bidirectional_is_not_random_access():
    assert Traversal.BIDIRECTIONAL.at_least(Traversal.RANDOM_ACCESS) is False


def test_forward_is_not_bidirectional():
    assert Traversal.FORWARD.at_least(Traversal.BIDIRECTIONAL) is False


@pytest.mark.parametrize("a_name,b_name", list(itertools.product(NAMES, NAMES)))
def test_at_least_is_antisymmetric(a_name, b_name):
    a_over_b = Traversal[a_name].at_least(Traversal[b_name])
    b_over_a = Traversal[b_name].at_least(Traversal[a_name])
    if a_over_b and b_over_a:
        assert Traversal[a_name] is Traversal[b_name]
    else:
        assert a_over_b != b_over_a


@pytest.mark.parametrize(
    "a_name,b_name,c_name", list(itertools.product(NAMES, repeat=3))
)
def test_at_least_is_transitive(a_name, b_name, c_name):
    a, b, c = Traversal[a_name], Traversal[b_name], Traversal[c_name]
    if Traversal[a_name].at_least(b) and Traversal[b_name].at_least(c):
        assert Traversal[a_name].at_least(c) is True


def test_order_of_categories():
    assert list(Traversal) == [
        Traversal.INCREMENTABLE,
        Traversal.SINGLE_PASS,
        Traversal.FORWARD,
        Traversal.BIDIRECTIONAL,
        Traversal.RANDOM_ACCESS,
    ]
    assert minimum_traversal(*Traversal) is Traversal.INCREMENTABLE


def test_at_least_rejects_non_traversal():
    with pytest.raises(TypeError):
        Traversal.FORWARD.at_least("forward")


def test_multipass_starts_at_forward():
    assert Traversal.SINGLE_PASS.is_multipass is False
    assert Traversal.FORWARD.is_multipass is True
    assert Traversal.RANDOM_ACCESS.is_multipass is True
    weakest = minimum_traversal(Traversal.FORWARD, Traversal.SINGLE_PASS)
    assert weakest.is_multipass is False
    assert minimum_traversal(
        Traversal.FORWARD, Traversal.RANDOM_ACCESS
    ).is_multipass is True


@pytest.mark.parametrize("name", NAMES)
def test_minimum_of_single_is_itself(name):
    assert minimum_traversal(Traversal[name]) is Traversal[name]


def test_minimum_picks_weakest():
    assert (
        minimum_traversal(
            Traversal.RANDOM_ACCESS, Traversal.SINGLE_PASS, Traversal.FORWARD
        )
        is Traversal.SINGLE_PASS
    )


@pytest.mark.parametrize("a_name,b_name", list(itertools.product(NAMES, NAMES)))
def test_minimum_is_supported_by_all(a_name, b_name):
    a, b = Traversal[a_name], Traversal[b_name]
    low = minimum_traversal(a, b)
    assert a.at_least(low)
    assert b.at_least(low)
    assert low in (a, b)
    assert minimum_traversal(b, a) is low


def test_minimum_returns_traversal_member():
    result = minimum_traversal(Traversal.BIDIRECTIONAL, Traversal.RANDOM_ACCESS)
    assert result is Traversal.BIDIRECTIONAL
    assert isinstance(result, Traversal)


def test_minimum_requires_arguments():
    with pytest.raises(TypeError):
        minimum_traversal()


def test_minimum_rejects_non_traversal():
    with pytest.raises(TypeError):
        minimum_traversal(Traversal.FORWARD, 1)