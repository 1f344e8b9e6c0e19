"""
tick-vector Sandbox
Interactive demo of tick-vector: movers steer toward the cursor or orbit the
center, and a 3D axis gizmo spins in the corner.

Controls:
  LClick  Spawn a mover at the cursor
  O       Toggle orbit mode
  Space   Pause
  C       Clear movers
  Esc     Quit
"""

import math
import random
import sys
from dataclasses import dataclass

import pygame

from tick_vector import Vector2, Vector3
from tick_vector.ieee import TAU

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "tick-vector Sandbox"

INITIAL_MOVER_COUNT = 10
MOVER_RADIUS = 8
MAX_SPEED = 320.0
STEERING = 0.06  # lerp step toward the desired velocity per frame
ORBIT_SPEED = 0.8  # radians per second
MIN_SPAWN_RADIUS = 60.0
MAX_SPAWN_RADIUS = 320.0

GIZMO_ORIGIN = Vector2(WIDTH - 90.0, HEIGHT - 90.0)
GIZMO_SIZE = 60.0
GIZMO_AXIS = Vector3(1.0, 1.0, 0.3)
GIZMO_SPIN = 0.6  # radians per second

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
VELOCITY_COLOR = (255, 255, 255)
CURSOR_COLOR = (90, 90, 120)
AXIS_COLORS = [(255, 90, 90), (90, 255, 120), (100, 160, 255)]
MOVER_COLORS = [
    (0, 255, 255),    # cyan
    (255, 0, 200),    # magenta
    (0, 255, 100),    # lime
    (255, 160, 0),    # orange
    (255, 215, 0),    # gold
    (180, 100, 255),  # violet
]

CENTER = Vector2(WIDTH / 2, HEIGHT / 2)


@dataclass
class Mover:
    position: Vector2
    velocity: Vector2
    color: tuple[int, int, int]


def spawn_mover(position: Vector2) -> Mover:
    heading = Vector2.from_polar(MAX_SPEED * 0.5, random.uniform(0.0, TAU))
    return Mover(position=position, velocity=heading, color=random.choice(MOVER_COLORS))


def spawn_ring(count: int) -> list[Mover]:
    movers = []
    for _ in range(count):
        offset = Vector2.from_polar(
            random.uniform(MIN_SPAWN_RADIUS, MAX_SPAWN_RADIUS),
            random.uniform(0.0, TAU),
        )
        movers.append(spawn_mover(CENTER + offset))
    return movers


def steer(mover: Mover, target: Vector2, dt: float) -> None:
    """Blend the velocity toward the target and move, capped at MAX_SPEED."""
    desired = (target - mover.position).trim(MAX_SPEED)
    mover.velocity = mover.velocity.lerp(desired, STEERING).trim(MAX_SPEED)
    mover.position = mover.position + mover.velocity * dt


def orbit(mover: Mover, dt: float) -> None:
    """Rotate the mover about the screen center; velocity is the tangent."""
    offset = (mover.position - CENTER).rotate(ORBIT_SPEED * dt)
    mover.position = CENTER + offset
    mover.velocity = offset.perpendicular() * ORBIT_SPEED


def gizmo_axes(angle: float) -> list[Vector2]:
    """Unit axes spun about GIZMO_AXIS, projected onto the screen plane."""
    projected = []
    for axis in (Vector3.unit_x(), Vector3.unit_y(), Vector3.unit_z()):
        spun = axis.rotate(angle, GIZMO_AXIS)
        # Screen Y grows downward.
        projected.append(Vector2(spun.x, -spun.y) * GIZMO_SIZE)
    return projected


def nearest(movers: list[Mover], point: Vector2) -> Mover | None:
    if not movers:
        return None
    return min(movers, key=lambda m: m.position.dist2(point))


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    movers = spawn_ring(INITIAL_MOVER_COUNT)
    spin = 0.0

    # --- State ---
    orbiting = False
    paused = False
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0
        cursor = Vector2.from_tuple(pygame.mouse.get_pos())

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_o:
                    orbiting = not orbiting
                elif event.key == pygame.K_c:
                    movers.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                movers.append(spawn_mover(Vector2.from_tuple(event.pos)))

        # --- Update ---
        if not paused:
            spin = (spin + GIZMO_SPIN * dt) % TAU
            for mover in movers:
                if orbiting:
                    orbit(mover, dt)
                else:
                    steer(mover, cursor, dt)

        # --- Draw ---
        screen.fill(BG_COLOR)

        if orbiting:
            pygame.draw.circle(screen, CURSOR_COLOR, CENTER.as_tuple(), 4)
        else:
            pygame.draw.circle(screen, CURSOR_COLOR, cursor.as_tuple(), 12, 1)

        for mover in movers:
            x, y = mover.position
            pygame.draw.circle(screen, mover.color, (int(x), int(y)), MOVER_RADIUS)
            tip = mover.position + mover.velocity.normalize() * (MOVER_RADIUS * 2.5)
            pygame.draw.line(screen, VELOCITY_COLOR, mover.position.as_tuple(), tip.as_tuple())

        for color, axis in zip(AXIS_COLORS, gizmo_axes(spin)):
            end = GIZMO_ORIGIN + axis
            pygame.draw.line(screen, color, GIZMO_ORIGIN.as_tuple(), end.as_tuple(), 2)

        # --- HUD ---
        radius, bearing = (cursor - CENTER).to_polar()
        hud_lines = [
            f"Movers: {len(movers)}   FPS: {pg_clock.get_fps():.0f}   "
            f"Mode: {'orbit' if orbiting else 'seek'}{'  [PAUSED]' if paused else ''}",
            f"Cursor {cursor}   polar r={radius:.1f} angle={math.degrees(bearing):.1f}",
        ]
        closest = nearest(movers, cursor)
        if closest is not None:
            hud_lines.append(
                f"Nearest {closest.position}   dist={closest.position.dist(cursor):.1f}   "
                f"bearing={math.degrees(cursor.angle_to(closest.position)):.1f}"
            )
        hud_lines.append("LClick=Spawn  O=Orbit  Space=Pause  C=Clear  Esc=Quit")
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
