import math
import random
from types import SimpleNamespace

import pytest

from yukifight.boss import (
    CHASE_FRAMES,
    CHASE_SPEED,
    COOLDOWN_FRAMES,
    FACE_DOWN,
    FACE_LEFT,
    FACE_RIGHT,
    FACE_UP,
    FIND_FRAMES,
    HIT_RADIUS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEARCH_TURN_FRAMES,
    SHOT_FRAMES,
    START_HITPOINT,
    Boss,
    BossState,
    facing_from_direction,
)
from yukifight.explosion import ExplosionPool
from yukifight.geometry import Circle, Vec2
from yukifight.lasers import LASER_REACH, make_boss_lasers
from yukifight.projectiles import make_boss_bullets
from yukifight.texture import TextureIndex


class _Recorder:
    def __init__(self):
        self.calls = []

    def draw(self, index, dx, dy, *rest):
        self.calls.append((index, dx, dy, rest))


def _boss(target_x=0.0, target_y=0.0, seed=3):
    target = SimpleNamespace(collision=Circle(target_x, target_y, 1.0))
    return Boss(
        target, make_boss_bullets(), make_boss_lasers(), ExplosionPool(), random.Random(seed)
    )


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Vec2(0.0, 0.0), FACE_DOWN),
        (Vec2(0.001, 0.0), FACE_DOWN),
        (Vec2(-1.0, 0.0), FACE_LEFT),
        (Vec2(1.0, 0.2), FACE_RIGHT),
        (Vec2(0.0, -1.0), FACE_UP),
        (Vec2(0.0, 1.0), FACE_DOWN),
        (Vec2(1.0, 1.0), FACE_DOWN),
        (Vec2(1.0, -1.0), FACE_UP),
    ],
)
def test_facing_from_direction(direction, expected):
    assert facing_from_direction(direction) == expected


def test_new_boss_is_hidden_and_searching():
    boss = _boss()
    assert boss.enabled is False
    assert boss.state is BossState.SEARCH
    assert boss.hitpoint == START_HITPOINT


def test_spawn_places_boss_on_screen():
    boss = _boss()
    boss.spawn()
    assert boss.is_enabled()
    assert 0.0 <= boss.pos.x <= SCREEN_WIDTH
    assert 0.0 <= boss.pos.y <= SCREEN_HEIGHT
    assert boss.muki in (FACE_DOWN, FACE_LEFT, FACE_RIGHT, FACE_UP)
    assert boss.collision.r == pytest.approx(HIT_RADIUS)
    assert boss.state is BossState.SEARCH


def test_init_state_spawns():
    boss = _boss()
    boss.state = BossState.INIT
    boss.update()
    assert boss.enabled
    assert boss.state is BossState.SEARCH


def test_add_damage_is_not_clamped():
    boss = _boss()
    left = boss.add_damage(START_HITPOINT + 5)
    assert left == boss.hitpoint
    assert left < 0


def test_destroy_stops_the_boss():
    boss = _boss(target_x=900.0, target_y=500.0)
    boss.spawn()
    boss.destroy()
    before = boss.pos
    boss.update()
    assert boss.state is BossState.DEAD
    assert not boss.is_enabled()
    assert boss.pos == before


def test_search_finds_target_in_front():
    boss = _boss(target_x=500.0, target_y=400.0)
    boss.pos = Vec2(500.0, 300.0)
    boss.muki = FACE_DOWN
    boss.update()
    assert boss.state is BossState.FIND
    assert boss.pos_return == boss.pos
    assert len(boss.explosions.active()) == 1


def test_search_ignores_target_behind():
    boss = _boss(target_x=500.0, target_y=200.0)
    boss.pos = Vec2(500.0, 300.0)
    boss.muki = FACE_DOWN
    boss.update()
    assert boss.state is BossState.SEARCH
    assert boss.explosions.active() == []


def test_search_turns_after_a_while():
    boss = _boss(target_x=0.0, target_y=0.0)
    boss.pos = Vec2(900.0, 500.0)
    boss.muki = FACE_DOWN
    for _ in range(SEARCH_TURN_FRAMES + 1):
        boss.update()
    assert boss.muki == FACE_LEFT
    assert boss.frame == 0


def test_find_moves_to_chase():
    boss = _boss()
    boss.state = BossState.FIND
    for _ in range(FIND_FRAMES):
        boss.update()
    assert boss.state is BossState.FIND
    boss.update()
    assert boss.state is BossState.CHASE


def test_chase_moves_toward_target_then_attacks():
    boss = _boss(target_x=1000.0, target_y=100.0)
    boss.pos = Vec2(100.0, 100.0)
    boss.state = BossState.CHASE
    boss.update()
    assert boss.pos.x == pytest.approx(100.0 + CHASE_SPEED)
    assert boss.muki == FACE_RIGHT
    for _ in range(CHASE_FRAMES):
        boss.update()
    assert boss.state in (BossState.SHOT, BossState.LASER)
    assert boss.dir_shot.length() == pytest.approx(CHASE_SPEED)


def test_shot_sprays_bullets_then_cools_down():
    boss = _boss()
    boss.pos = Vec2(300.0, 300.0)
    boss.state = BossState.SHOT
    boss.dir_shot = Vec2(CHASE_SPEED, 0.0)
    boss.update()
    first = boss.bullets.active()
    assert len(first) == 1
    assert math.hypot(first[0].move_x, first[0].move_y) == pytest.approx(1.0)
    for _ in range(SHOT_FRAMES):
        boss.update()
    assert boss.state is BossState.COOLDOWN
    assert len(boss.bullets.active()) == SHOT_FRAMES + 1


def test_laser_fires_once():
    boss = _boss()
    boss.pos = Vec2(300.0, 300.0)
    boss.state = BossState.LASER
    boss.dir_shot = Vec2(1.0, 0.0)
    boss.update()
    boss.update()
    active = boss.lasers.active()
    assert len(active) == 1
    assert active[0].collision.ex == pytest.approx(LASER_REACH)


def test_cooldown_then_return_home():
    boss = _boss()
    boss.pos = Vec2(100.0, 100.0)
    boss.pos_return = Vec2(100.0, 110.0)
    boss.state = BossState.COOLDOWN
    for _ in range(COOLDOWN_FRAMES + 1):
        boss.update()
    assert boss.state is BossState.RETURN
    for _ in range(20):
        boss.update()
        if boss.state is BossState.SEARCH:
            break
    assert boss.state is BossState.SEARCH
    assert (boss.pos - boss.pos_return).length() <= CHASE_SPEED


def test_draw_only_when_enabled():
    boss = _boss()
    recorder = _Recorder()
    boss.draw(recorder)
    assert recorder.calls == []
    boss.spawn()
    boss.draw(recorder)
    assert len(recorder.calls) == 1
    assert recorder.calls[0][0] is TextureIndex.YUKIDARUMA
    assert recorder.calls[0][1:3] == (boss.pos.x, boss.pos.y)