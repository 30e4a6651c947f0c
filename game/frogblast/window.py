"""
Arcade render sink: draws a FrameSnapshot. Simulation space has y pointing
down, arcade has y pointing up, so every shape is flipped on the way out.
"""

from __future__ import annotations

import math

import arcade

from .enemies import tentacle_curves
from .entities import BulletType, EnemyKind, PowerUpType, WeaponType
from .simulation import FrameSnapshot, Simulation
from .utils import cubic_bezier


class FrogBlastWindow(arcade.Window):
    """Arcade window for rendering the FrogBlast simulation"""

    def __init__(self, sim: Simulation, width: int, height: int, title: str = "FrogBlast - Arcade"):
        super().__init__(width, height, title)
        self.sim = sim

        # Colors
        self.background_color = (8, 8, 24)
        self.PLAYER_C = (60, 190, 90)
        self.SHIELD_C = (80, 160, 255)
        self.MOVING_C = (220, 60, 60)
        self.DRIFTING_C = (240, 150, 40)
        self.UFO_C = (170, 170, 180)
        self.BLOB_C = (130, 40, 170)
        self.BULLET_C = (255, 255, 120)
        self.LASER_C = (255, 60, 60)
        self.CHARGE_C = (180, 60, 220)
        self.ENEMY_BULLET_C = (255, 120, 120)
        self.HUD_C = (230, 230, 230)

    # ----------------------------
    # Coordinate helpers
    # ----------------------------

    def _fy(self, y: float) -> float:
        return self.height - y

    def _rect(self, x, y, w, h, color):
        arcade.draw_lrbt_rectangle_filled(x, x + w, self._fy(y + h), self._fy(y), color)

    def _circle(self, cx, cy, r, color):
        arcade.draw_circle_filled(cx, self._fy(cy), r, color)

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        snap = self.sim.snapshot()

        self._draw_stars(snap)
        for particle in snap.particles:
            self._circle(particle.x, particle.y, particle.size,
                         (*particle.color, int(255 * max(0.0, particle.alpha))))
        self._draw_obstacles(snap)
        self._draw_power_ups(snap)
        self._draw_bullets(snap)
        self._draw_enemies(snap)
        if not snap.game_over:
            self._draw_player(snap)
        self._draw_hud(snap)

    def _draw_stars(self, snap: FrameSnapshot):
        for star in snap.stars:
            level = int(255 * star.brightness)
            self._rect(star.x, star.y, star.size, star.size, (level, level, level))

    def _draw_obstacles(self, snap: FrameSnapshot):
        for o in snap.obstacles:
            base = (o.shade, o.shade, o.shade)
            self._draw_skyscraper(o.x, 0, o.width, o.top_height, base, o.windows)
            self._draw_skyscraper(o.x, o.bottom_y, o.width, self.height - o.bottom_y, base, o.windows)

    def _draw_skyscraper(self, x, y, w, h, base, windows):
        self._rect(x, y, w, h, base)
        win_w, win_h, spacing = 8, 12, 4
        start_x = x + (w - (win_w * 3 + spacing * 2)) / 2
        start_y = y + 10
        for win in windows:
            wx = start_x + win.col * (win_w + spacing)
            wy = start_y + win.row * (win_h + spacing)
            if wy + win_h <= y + h:
                self._rect(wx, wy, win_w, win_h, (255, 255, 0) if win.lit else (0, 0, 0))

    def _draw_power_ups(self, snap: FrameSnapshot):
        labels = {PowerUpType.SHIELD: "S", PowerUpType.FAST_LASER: "L", PowerUpType.CHARGE_GUN: "C"}
        colors = {
            PowerUpType.SHIELD: self.SHIELD_C,
            PowerUpType.FAST_LASER: self.LASER_C,
            PowerUpType.CHARGE_GUN: self.CHARGE_C,
        }
        for u in snap.power_ups:
            scale = 1 + math.sin(u.pulse_timer / 200) * 0.2
            cx, cy = u.x + u.width / 2, u.y + u.height / 2
            self._circle(cx, cy, (u.width / 2) * scale, colors[u.kind])
            arcade.draw_text(labels[u.kind], cx, self._fy(cy), (255, 255, 255), 16,
                             anchor_x="center", anchor_y="center", bold=True)

    def _draw_bullets(self, snap: FrameSnapshot):
        for b in snap.player_bullets:
            if b.kind == BulletType.CHARGE:
                self._circle(b.x + b.width / 2, b.y + b.height / 2, b.width / 2, (*self.CHARGE_C, 200))
            elif b.kind == BulletType.LASER:
                self._rect(b.x, b.y, b.width, b.height, self.LASER_C)
            else:
                self._rect(b.x, b.y, b.width, b.height, self.BULLET_C)
        for b in snap.enemy_bullets:
            if b.kind in (BulletType.UFO, BulletType.BLOB):
                color = self.UFO_C if b.kind == BulletType.UFO else (255, 0, 255)
                self._circle(b.x + b.width / 2, b.y + b.height / 2, b.width / 2, color)
            else:
                self._rect(b.x, b.y, b.width, b.height, self.ENEMY_BULLET_C)

    def _draw_enemies(self, snap: FrameSnapshot):
        cfg = self.sim.config
        for e in snap.enemies:
            cx, cy = e.center
            if e.kind == EnemyKind.BLOB:
                for curve in tentacle_curves(e, cfg):
                    points = [cubic_bezier(*curve, k / 16) for k in range(17)]
                    arcade.draw_line_strip([(px, self._fy(py)) for px, py in points],
                                           self.BLOB_C, cfg.tentacle_width)
                self._circle(cx, cy, e.width / 2, self.BLOB_C)
                self._circle(cx, cy, e.width * 0.2, (255, 40, 40))
                self._draw_health(e, cfg.blob_health)
            elif e.kind == EnemyKind.UFO:
                self._circle(cx, cy, e.width / 2, self.UFO_C)
                self._circle(cx, cy, e.width / 3, (90, 200, 255))
                self._draw_health(e, cfg.ufo_health)
            else:
                color = self.MOVING_C if e.kind == EnemyKind.MOVING else self.DRIFTING_C
                self._circle(cx, cy, e.width / 2, color)
                self._circle(e.x + 10, e.y + 15, 5, (255, 255, 255))
                self._circle(e.x + 30, e.y + 15, 5, (255, 255, 255))

    def _draw_health(self, e, max_health: int):
        self._rect(e.x, e.y - 10, e.width, 4, (80, 0, 0))
        self._rect(e.x, e.y - 10, e.width * e.health / max_health, 4, (0, 220, 0))

    def _draw_player(self, snap: FrameSnapshot):
        p = snap.player
        cx, cy = p.center
        if snap.invulnerable:
            alpha = int(60 + 120 * snap.blink_phase)
            self._circle(cx, cy, p.width * 0.8, (*self.SHIELD_C, alpha))
        self._circle(cx, cy, p.width / 2, self.PLAYER_C)
        self._circle(p.x + p.width - 10, p.y + 10, 5, (255, 255, 255))
        self._circle(p.x + p.width - 25, p.y + 10, 5, (255, 255, 255))
        self._circle(p.x + p.width - 8, p.y + 10, 2, (0, 0, 0))
        self._circle(p.x + p.width - 23, p.y + 10, 2, (0, 0, 0))

        # Shield pips above the frog
        size, gap = 10, 5
        start_x = p.x + (p.width - (size * snap.max_shields + gap * (snap.max_shields - 1))) / 2
        for i in range(snap.max_shields):
            color = self.SHIELD_C if i < snap.shields else (60, 60, 60)
            self._rect(start_x + i * (size + gap), p.y - size - 5, size, size, color)

        # Charge meter under the frog
        if snap.weapon == WeaponType.CHARGE_GUN:
            meter_w, meter_h = 100, 10
            mx = p.x + (p.width - meter_w) / 2
            my = p.y + p.height + 10
            self._rect(mx, my, meter_w, meter_h, (60, 60, 60))
            self._rect(mx, my, meter_w * snap.charge_level / snap.max_charge, meter_h, self.CHARGE_C)

    def _draw_hud(self, snap: FrameSnapshot):
        arcade.draw_text(f"Score: {snap.score}", self.width - 12, self.height - 30,
                         self.HUD_C, 18, anchor_x="right")
        if snap.weapon != WeaponType.DEFAULT:
            label = "Laser Ammo" if snap.weapon == WeaponType.FAST_LASER else "Charge Ammo"
            arcade.draw_text(f"{label}: {snap.ammo}", 12, self.height - 30, self.HUD_C, 18)
        if snap.game_over:
            arcade.draw_text("GAME OVER", self.width / 2, self.height / 2 + 20,
                             (255, 80, 80), 40, anchor_x="center", bold=True)
            arcade.draw_text(f"Final score: {snap.score}  -  press R to restart",
                             self.width / 2, self.height / 2 - 30, self.HUD_C, 18, anchor_x="center")
