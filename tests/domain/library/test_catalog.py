"""Tests for the in-memory catalog snapshot."""

import threading

from music_catalog.domain.library import Catalog, Track


def test_snapshot_preserves_order():
    tracks = [Track("b", "", 0), Track("a", "", 0)]

    assert Catalog(tracks).snapshot() == tuple(tracks)


def test_publish_appends_new_title():
    catalog = Catalog([Track("first", "", 0)])

    catalog.publish(Track("second", "", 1))

    assert [t.title for t in catalog.snapshot()] == ["first", "second"]
    assert len(catalog) == 2


def test_publish_replaces_same_title_in_place():
    catalog = Catalog([Track("a", "", 0), Track("b", "old", 0), Track("c", "", 0)])

    catalog.publish(Track("b", "new", 1))

    assert catalog.snapshot() == (Track("a", "", 0), Track("b", "new", 1), Track("c", "", 0))


def test_old_snapshot_unchanged_after_publish():
    """Test readers holding a snapshot never see it mutate."""
    catalog = Catalog([Track("a", "", 0)])
    before = catalog.snapshot()

    catalog.publish(Track("b", "", 0))

    assert before == (Track("a", "", 0),)
    assert catalog.snapshot() is not before


def test_concurrent_publish_loses_nothing():
    """Test concurrent writers each land exactly one entry."""
    catalog = Catalog()
    titles = [f"track {i}" for i in range(50)]
    threads = [
        threading.Thread(target=catalog.publish, args=(Track(t, "", 0),)) for t in titles
    ]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(t.title for t in catalog.snapshot()) == sorted(titles)


def test_readers_see_whole_snapshots():
    """Test a reader racing a writer only observes complete prefixes of the publish order."""
    catalog = Catalog()
    titles = [f"t{i}" for i in range(200)]
    observed = []

    def read():
        for _ in range(200):
            observed.append(catalog.snapshot())

    reader = threading.Thread(target=read)
    reader.start()
    for title in titles:
        catalog.publish(Track(title, "", 0))
    reader.join()

    for snapshot in observed:
        assert [t.title for t in snapshot] == titles[: len(snapshot)]
