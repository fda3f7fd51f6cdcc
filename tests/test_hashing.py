import pytest

from algokit.hashing import KEY_LIMIT, BucketHashMap, BucketHashSet


def test_set_documented_sequence():
    hash_set = BucketHashSet()
    hash_set.add(1)
    hash_set.add(2)
    assert 1 in hash_set
    assert 3 not in hash_set
    hash_set.add(2)
    assert 2 in hash_set
    hash_set.remove(2)
    assert 2 not in hash_set


def test_set_keys_sharing_a_bucket_are_independent():
    hash_set = BucketHashSet()
    hash_set.add(5)
    hash_set.add(1005)
    hash_set.remove(5)
    assert 5 not in hash_set
    assert 1005 in hash_set


def test_set_remove_missing_is_harmless():
    hash_set = BucketHashSet()
    hash_set.remove(42)
    hash_set.add(7)
    hash_set.remove(42)
    assert 42 not in hash_set
    assert 7 in hash_set


def test_set_bounds():
    hash_set = BucketHashSet()
    hash_set.add(0)
    hash_set.add(KEY_LIMIT - 1)
    assert 0 in hash_set
    assert KEY_LIMIT - 1 in hash_set
    assert KEY_LIMIT not in hash_set
    assert -1 not in hash_set


@pytest.mark.parametrize("key", [-1, KEY_LIMIT])
def test_set_rejects_out_of_range(key):
    with pytest.raises(ValueError):
        BucketHashSet().add(key)


def test_map_documented_sequence():
    hash_map = BucketHashMap()
    hash_map.put(1, 1)
    hash_map.put(2, 2)
    assert hash_map.get(1) == 1
    assert hash_map.get(3) == -1
    hash_map.put(2, 1)
    assert hash_map.get(2) == 1
    hash_map.remove(2)
    assert hash_map.get(2) == -1


def test_map_keys_sharing_a_bucket_are_independent():
    hash_map = BucketHashMap()
    hash_map.put(5, 50)
    hash_map.put(1005, 60)
    assert hash_map.get(5) == 50
    assert hash_map.get(1005) == 60
    hash_map.remove(5)
    assert hash_map.get(5) == -1
    assert hash_map.get(1005) == 60


def test_map_remove_missing_is_harmless():
    hash_map = BucketHashMap()
    hash_map.remove(9)
    assert hash_map.get(9) == -1


def test_map_out_of_range_lookup_is_missing():
    hash_map = BucketHashMap()
    assert hash_map.get(KEY_LIMIT) == -1
    assert hash_map.get(-5) == -1


@pytest.mark.parametrize("key", [-1, KEY_LIMIT])
def test_map_rejects_out_of_range(key):
    with pytest.raises(ValueError):
        BucketHashMap().put(key, 1)