import concurrent.futures as cf

from cart_offer.models.offer import Offer, OfferType
from cart_offer.services.offer_store import OfferStore


def _offer(restaurant_id, value, segments=("p1",), kind=OfferType.FLAT_AMOUNT):
    return Offer(restaurant_id, kind, value, tuple(segments))


def test_lookup_unknown_restaurant_is_empty(store):
    assert store.lookup(999) == []


def test_lookup_keeps_insertion_order(store):
    a = store.add(_offer(4, 10))
    b = store.add(_offer(4, 15, ("p2",), OfferType.FLAT_PERCENTAGE))
    assert store.lookup(4) == [a, b]
    assert a.sequence < b.sequence


def test_add_returns_copy_with_sequence(store):
    draft = _offer(1, 10, ("p1", "p2"))
    stored = store.add(draft)
    assert draft.sequence is None
    assert stored.sequence is not None
    assert (stored.restaurant_id, stored.offer_type, stored.value, stored.segments) == (
        1,
        OfferType.FLAT_AMOUNT,
        10,
        ("p1", "p2"),
    )


def test_restaurants_do_not_share_offers(store):
    store.add(_offer(5, 10))
    store.add(_offer(6, 20))
    assert [o.value for o in store.lookup(5)] == [10]
    assert [o.value for o in store.lookup(6)] == [20]


def test_clear_drops_everything_and_sequence_keeps_growing(store):
    first = store.add(_offer(1, 10))
    store.clear()
    assert store.lookup(1) == []
    assert store.count() == 0
    again = store.add(_offer(1, 10))
    assert again.sequence > first.sequence


def test_separate_stores_are_isolated():
    a, b = OfferStore(), OfferStore()
    try:
        a.add(_offer(1, 10))
        assert b.lookup(1) == []
    finally:
        a.dispose()
        b.dispose()


def test_concurrent_adds_get_unique_increasing_sequences(store):
    workers, per_worker = 8, 25

    def add_many(worker):
        for i in range(per_worker):
            store.add(_offer(1, worker * 1000 + i))

    with cf.ThreadPoolExecutor(max_workers=workers) as ex:
        list(ex.map(add_many, range(workers)))

    offers = store.lookup(1)
    assert len(offers) == workers * per_worker
    seqs = [o.sequence for o in offers]
    assert seqs == sorted(seqs) and len(set(seqs)) == len(seqs)

    # cada hilo conserva su propio orden de alta
    for worker in range(workers):
        mine = [o.value for o in offers if o.value // 1000 == worker]
        assert mine == sorted(mine)


def test_lookup_outside_integer_range_is_empty(store):
    store.add(_offer(1, 10))
    assert store.lookup(2**63) == []
    assert store.lookup(-(2**63) - 1) == []
