from __future__ import annotations

import pytest

from socialgraph.core.errors import NotFoundError
from socialgraph.core.service import SocialService
from socialgraph.core.suggestions import mutual_counts


def _users(service: SocialService, *names: str):
    return [service.register_user(name, name.title()) for name in names]


def test_friend_of_friend_scores_one_and_disappears_once_followed(service: SocialService) -> None:
    a, b, c = _users(service, "a", "b", "c")
    service.follow(a.id, b.id)
    service.follow(b.id, c.id)

    suggestions = {s.user.id: s.mutual_count for s in service.suggestions(a.id)}
    assert suggestions == {c.id: 1}

    service.follow(a.id, c.id)
    assert service.suggestions(a.id) == []


def test_counts_paths_through_each_followee(service: SocialService) -> None:
    me, x, y, target = _users(service, "me", "x", "y", "target")
    service.follow(me.id, x.id)
    service.follow(me.id, y.id)
    service.follow(x.id, target.id)
    service.follow(y.id, target.id)

    ranked = service.suggestions(me.id)

    assert [(s.user.id, s.mutual_count) for s in ranked] == [(target.id, 2)]


def test_excludes_self_and_followees_and_lists_everyone_else(service: SocialService) -> None:
    me, friend, loner, other = _users(service, "me", "friend", "loner", "other")
    service.follow(me.id, friend.id)
    service.follow(friend.id, me.id)
    service.follow(friend.id, other.id)

    ranked = service.suggestions(me.id)
    ids = [s.user.id for s in ranked]

    assert me.id not in ids
    assert friend.id not in ids
    assert sorted(ids) == sorted([loner.id, other.id])
    assert len(ids) == len(set(ids))
    assert ranked[0].user.id == other.id
    assert ranked[0].mutual_count == 1
    assert ranked[1].mutual_count == 0


def test_ranking_is_descending_with_user_id_tie_break(service: SocialService) -> None:
    me, hub1, hub2, *rest = _users(service, "me", "hub1", "hub2", "p", "q", "r", "s")
    service.follow(me.id, hub1.id)
    service.follow(me.id, hub2.id)
    p, q, r, s = rest
    service.follow(hub1.id, p.id)
    service.follow(hub2.id, p.id)
    service.follow(hub1.id, q.id)
    service.follow(hub2.id, r.id)

    ranked = service.suggestions(me.id)
    counts = [item.mutual_count for item in ranked]

    assert counts == sorted(counts, reverse=True)
    assert ranked[0].user.id == p.id
    ones = [item.user.id for item in ranked if item.mutual_count == 1]
    zeros = [item.user.id for item in ranked if item.mutual_count == 0]
    assert ones == sorted([q.id, r.id])
    assert zeros == [s.id]


def test_mutual_counts_with_no_followees_are_all_zero(service: SocialService) -> None:
    me, b, c = _users(service, "me", "b", "c")
    service.follow(b.id, c.id)

    assert mutual_counts(service.store.snapshot(), me.id) == {b.id: 0, c.id: 0}


def test_suggestions_for_unknown_user_is_not_found(service: SocialService) -> None:
    with pytest.raises(NotFoundError):
        service.suggestions("missing")


def test_candidates_that_no_longer_resolve_are_dropped(service: SocialService) -> None:
    a, b = _users(service, "a", "b")
    service.follow(a.id, b.id)
    service.store.add_follow(b.id, "ghost")

    assert mutual_counts(service.store.snapshot(), a.id) == {"ghost": 1}
    assert service.suggestions(a.id) == []
