"""Integration test: the utilities used together the way game code does."""

import math

from somasim import (
    Color32,
    Norm,
    Vector2,
    color_to_hex,
    distance,
    hex_to_color,
    remove_at_unordered,
)


def test_despawn_nearest_enemy_and_tint_survivors():
    """Find the nearest enemy per norm, drop it with swap-and-pop, recolor the rest."""
    player = Vector2(0.0, 0.0)
    enemies = [Vector2(5.0, 0.0), Vector2(3.0, 3.0), Vector2(-1.0, 4.5), Vector2(10.0, 10.0)]

    def nearest_index(norm: Norm) -> int:
        dist = norm.get_metric()
        return min(range(len(enemies)), key=lambda i: dist(player, enemies[i]))

    # Taxicab favours axis-aligned targets, Chebyshev favours diagonal ones
    nearest = {norm: nearest_index(norm) for norm in Norm}
    assert nearest[Norm.TAXICAB] == 0
    assert nearest[Norm.EUCLIDEAN] == 1
    assert nearest[Norm.CHEBYSHEV] == 1

    removed = enemies[nearest[Norm.EUCLIDEAN]]
    remove_at_unordered(enemies, nearest[Norm.EUCLIDEAN])

    assert len(enemies) == 3
    assert removed not in enemies
    assert enemies[1] == Vector2(10.0, 10.0)

    palette = {color_to_hex(Color32(255, 0, 0)): "hostile", "00FF00": "friendly"}
    tints = [hex_to_color(hex_string) for hex_string in palette]

    assert tints == [Color32(255, 0, 0, 255), Color32(0, 255, 0, 255)]
    assert all(distance(player, enemy, math.inf) > 0 for enemy in enemies)
