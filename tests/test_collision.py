from neon_glide.game.collision import collides, first_collision, rects_overlap
from neon_glide.game.entities import Obstacle, Player


def ob(id, x, y, w=60, h=12):
    return Obstacle(id=id, x=x, y=y, width=w, height=h, speed=100)


def test_empty_field_never_collides():
    assert not collides(Player().rect(), [])


def test_overlap_detected():
    p = Player()  # (156, 556, 48, 60)
    assert collides(p.rect(), [ob(1, 200, 560)])


def test_exact_overlap_detected():
    p = Player()
    x, y, w, h = p.rect()
    assert collides(p.rect(), [ob(1, x, y, w, h)])


def test_touching_edges_do_not_collide():
    p = Player()
    x, y, w, h = p.rect()
    touching = [
        ob(1, x + w, y + 10),  # right edge
        ob(2, x - 60, y + 10),  # left edge
        ob(3, x, y - 12),  # top edge
        ob(4, x, y + h),  # bottom edge
        ob(5, x + w, y - 12),  # corner
    ]
    for o in touching:
        assert not collides(p.rect(), [o]), o
    assert not collides(p.rect(), touching)


def test_needs_overlap_on_both_axes():
    p = Player()
    assert not collides(p.rect(), [ob(1, 170, 100)])  # x overlaps only
    assert not collides(p.rect(), [ob(2, 0, 570)])  # y overlaps only


def test_first_collision_returns_first_in_order():
    p = Player()
    miss = ob(1, 0, 0)
    hit_a = ob(2, 160, 570)
    hit_b = ob(3, 170, 580)
    assert first_collision(p.rect(), [miss, hit_a, hit_b]) is hit_a
    assert first_collision(p.rect(), [miss]) is None


def test_rects_overlap_is_symmetric():
    a = (0, 0, 10, 10)
    b = (5, 5, 10, 10)
    c = (10, 0, 5, 5)
    assert rects_overlap(a, b) and rects_overlap(b, a)
    assert not rects_overlap(a, c) and not rects_overlap(c, a)
