from cookie_flash.extensions import Extensions, begin_cycle, request_extensions, response_extensions
from cookie_flash.jar import FlashCookie
from cookie_flash.response import StagedPayload


def test_extensions_keyed_by_type():
    bag = Extensions()
    bag.insert(StagedPayload("one"))
    bag.insert(StagedPayload("two"))

    assert len(bag) == 1
    assert bag.get(StagedPayload).value == "two"
    assert FlashCookie not in bag
    assert bag.get(FlashCookie) is None
    assert bag.remove(StagedPayload).value == "two"
    assert StagedPayload not in bag


def test_begin_cycle_installs_fresh_bags():
    scope = {"type": "http"}
    request_bag, response_bag = begin_cycle(scope)

    assert request_extensions(scope) is request_bag
    assert response_extensions(scope) is response_bag
    assert request_bag is not response_bag
    # строковые ключи scope не трогаем
    assert set(k for k in scope if isinstance(k, str)) == {"type"}


def test_shallow_copy_of_scope_shares_bags():
    scope = {"type": "http"}
    begin_cycle(scope)
    copied = dict(scope)

    response_extensions(copied).insert(StagedPayload("staged"))
    assert response_extensions(scope).get(StagedPayload).value == "staged"
