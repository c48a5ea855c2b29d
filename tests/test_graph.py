from __future__ import annotations

from socialgraph.core import graph
from socialgraph.core.service import SocialService


def _trio(service: SocialService):
    alice = service.register_user("alice", "Alice")
    bob = service.register_user("bob", "Bob")
    carol = service.register_user("carol", "Carol")
    return alice, bob, carol


def test_followers_and_following_resolve_users(service: SocialService) -> None:
    alice, bob, carol = _trio(service)
    service.follow(alice.id, bob.id)
    service.follow(carol.id, bob.id)
    service.follow(bob.id, carol.id)
    snapshot = service.store.snapshot()

    assert graph.followees_of(snapshot, alice.id) == {bob.id}
    assert [u.id for u in graph.followers_of(snapshot, bob.id)] == [alice.id, carol.id]
    assert [u.id for u in graph.following_of(snapshot, bob.id)] == [carol.id]
    assert graph.followers_of(snapshot, alice.id) == []


def test_counts_agree_with_resolved_lists(service: SocialService) -> None:
    alice, bob, carol = _trio(service)
    service.follow(alice.id, bob.id)
    service.follow(alice.id, carol.id)
    service.follow(bob.id, alice.id)
    service.create_post(alice.id, "one")
    service.create_post(alice.id, "two")
    snapshot = service.store.snapshot()

    for user in (alice, bob, carol):
        assert graph.follower_count(snapshot, user.id) == len(graph.followers_of(snapshot, user.id))
        assert graph.following_count(snapshot, user.id) == len(graph.following_of(snapshot, user.id))

    profile = graph.profile_of(snapshot, alice)
    assert (profile.follower_count, profile.following_count, profile.post_count) == (1, 2, 2)


def test_dangling_follow_endpoints_are_filtered(service: SocialService) -> None:
    alice = service.register_user("alice", "Alice")
    service.store.add_follow("ghost", alice.id)
    service.store.add_follow(alice.id, "ghost")
    snapshot = service.store.snapshot()

    assert graph.followers_of(snapshot, alice.id) == []
    assert graph.following_of(snapshot, alice.id) == []
    assert graph.followees_of(snapshot, alice.id) == {"ghost"}


def test_likers_of_skips_unknown_users(service: SocialService) -> None:
    alice, bob, _ = _trio(service)
    post = service.create_post(alice.id, "hello")
    service.like(bob.id, post.id)
    service.store.add_like("ghost", post.id)

    assert [u.id for u in graph.likers_of(service.store.snapshot(), post.id)] == [bob.id]


def test_posts_by_is_newest_first(service: SocialService) -> None:
    alice, bob, _ = _trio(service)
    first = service.create_post(alice.id, "first")
    service.create_post(bob.id, "other author")
    second = service.create_post(alice.id, "second")

    assert [p.id for p in graph.posts_by(service.store.snapshot(), alice.id)] == [second.id, first.id]
