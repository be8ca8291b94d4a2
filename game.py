# game.py - Game Front-End
"""
tkinter front-end for MoonRacer.
Collects keyboard input, drives the simulation at a fixed 60 Hz and draws the
level, the ship and its ghost on a canvas. No game rule lives here.
"""

import time
import tkinter as tk

from audio_manager import AudioManager
from config import FREQ, HIGHSCORE_FILE, SCREEN_DIM, SHIP_SIZE, GOAL_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from controls import KEY_BINDINGS, Action, Direction, thrust_from_directions
from events import LevelCompleted, NewHighscore
from highscore import save_high_scores
from level import Vec2, Vec3
from moonracer import GameStatus, MoonRacer, TickInput, TickResult

FG = "#00ffff"  # Cyan text and buttons
BG = "#000000"  # Black background
FONT_TITLE = ("Arial", 24, "bold")  # Overlay titles
FONT_TEXT = ("Arial", 14, "bold")  # HUD and overlay labels
FONT_BUTTON = ("Arial", 12, "bold")


class MoonRacerGame(tk.Canvas):
    """Canvas rendering the run and hosting the menus."""

    MAX_CATCHUP_TICKS = 5  # Ticks simulated at most per frame after a stall
    FRAME_DELAY_MS = 8  # Polling delay between frames

    # World units -> pixels
    SCALE = WINDOW_WIDTH / SCREEN_DIM[0]

    def __init__(self, master: tk.Tk, racer: MoonRacer, audio: AudioManager,
                 save_path: str = HIGHSCORE_FILE, **kwargs) -> None:
        super().__init__(master, width=WINDOW_WIDTH, height=WINDOW_HEIGHT,
                         bg=BG, highlightthickness=0, **kwargs)
        self.pack(fill="both", expand=True)

        self.racer = racer  # Simulation core, only driven through tick()
        self.audio = audio  # Fed with the events of each tick
        self.save_path = save_path  # Highscore file rewritten on each record

        # Input state
        self.pressed: set[Direction] = set()  # Directions currently held down
        self.pending_restart = False  # Delivered with the next tick
        self.pending_pause = False  # Delivered with the next tick

        # Canvas items
        self.wall_items: list[int] = []  # Rebuilt when the level changes
        self.drawn_level: int | None = None  # Level the walls were drawn for
        self.pad_item = self.create_rectangle(0, 0, 0, 0, fill="#005500", outline="")  # Dark until armed
        self.goal_item = self.create_rectangle(0, 0, 0, 0, fill="#ff2020", outline="")
        self.ghost_item = self.create_rectangle(0, 0, 0, 0, fill="", outline="#8888ff", width=2)  # Outline only
        self.ship_item = self.create_rectangle(0, 0, 0, 0, fill="#e0e0ff", outline="")
        self.gizmo_item = self.create_line(0, 0, 0, 0, fill="#3060ff", width=3)  # Velocity vector

        # HUD
        self.status_txt = tk.StringVar(value="")  # Score and timer, top right
        self.level_txt = tk.StringVar(value="")  # Level name, top left
        tk.Label(master, textvariable=self.level_txt, bg=BG, fg=FG,
                 font=FONT_TEXT).place(x=20, y=10)
        tk.Label(master, textvariable=self.status_txt, bg=BG, fg=FG,
                 font=FONT_TEXT).place(relx=1.0, x=-360, y=10)

        self.overlay: tk.Frame | None = None  # Menu currently shown, if any

        master.bind("<KeyPress>", self._on_key_down)
        master.bind("<KeyRelease>", self._on_key_up)

        self.last_time = time.perf_counter()  # Timing for the fixed timestep
        self.accumulator = 0.0  # Wall time not simulated yet
        self.after(0, self._game_loop)

    # ------------------------------------------------------------------ #
    # COORDINATES
    # ------------------------------------------------------------------ #
    def to_canvas(self, x: float, y: float) -> tuple[float, float]:
        """Screen space (centered, y up) to canvas pixels (top left, y down)."""
        return WINDOW_WIDTH / 2 + x * self.SCALE, WINDOW_HEIGHT / 2 - y * self.SCALE

    def _place_box(self, item: int, center: Vec2 | Vec3, size: Vec2) -> None:
        x1, y1 = self.to_canvas(center[0] - size[0] / 2, center[1] + size[1] / 2)
        x2, y2 = self.to_canvas(center[0] + size[0] / 2, center[1] - size[1] / 2)
        self.coords(item, x1, y1, x2, y2)

    # ------------------------------------------------------------------ #
    # MENUS
    # ------------------------------------------------------------------ #
    def _open_overlay(self, title: str) -> tk.Frame:
        self.close_overlay()
        frame = tk.Frame(self.master, bg=BG, bd=0)
        frame.place(relx=0.5, rely=0.5, anchor="center")
        tk.Label(frame, text=title, fg=FG, bg=BG, font=FONT_TITLE).pack(pady=(0, 10))
        self.overlay = frame
        return frame

    def close_overlay(self) -> None:
        if self.overlay is not None:
            self.overlay.destroy()
            self.overlay = None

    def _button(self, parent: tk.Frame, text: str, command) -> None:
        tk.Button(parent, text=text, font=FONT_BUTTON, fg=BG, bg=FG,
                  activebackground="#33ffff", activeforeground=BG, relief="flat",
                  padx=20, pady=5, command=command).pack(pady=(0, 8))

    def show_menu(self) -> None:
        """Main menu: continue from the first unbeaten level."""
        frame = self._open_overlay("M O O N R A C E R")
        new_player = len(self.racer.ctx.highscores) == 0
        self._button(frame, "New Game" if new_player else "Continue",
                     lambda: self.start_level(self.racer.ctx.current_level))
        if not new_player:
            self._button(frame, "Select Level", self.show_level_select)
        self._button(frame, "Sound: " + ("ON" if self.audio.sound_enabled else "OFF"),
                     self._on_toggle_sound_clicked)
        self._button(frame, "Quit", self.master.destroy)

    def show_level_select(self) -> None:
        frame = self._open_overlay("Select Level")
        for index, level in enumerate(self.racer.levels):
            best = self.racer.ctx.highscores.best(index)
            label = level.name if best is None else f"{level.name}  ({best * FREQ:.3f})"
            self._button(frame, label, lambda i=index: self.start_level(i))

    def show_pause(self) -> None:
        frame = self._open_overlay("PAUSED")
        self._button(frame, "Resume", self._resume)
        self._button(frame, "Restart", self._restart)
        self._button(frame, "Levels", self.show_level_select)
        self._button(frame, "Quit", self._quit_to_menu)

    def show_completed(self) -> None:
        racer = self.racer
        frame = self._open_overlay("Level Completed")
        if racer.ctx.made_highscore:
            tk.Label(frame, text="New HighScore!", fg=FG, bg=BG, font=FONT_TEXT).pack()
        tk.Label(frame, text=f"Final Score: {racer.ctx.elapsed()}", fg=FG, bg=BG,
                 font=FONT_TEXT).pack(pady=(0, 10))
        if racer.has_remaining_level:
            self._button(frame, "Next Level", lambda: self.start_level(racer.ctx.current_level + 1))
        self._button(frame, "Restart", self._restart)
        if not racer.has_remaining_level:
            self._button(frame, "Select Level", self.show_level_select)
            tk.Label(frame, text=racer.final_text(), fg=FG, bg=BG, font=FONT_TEXT).pack()

    def _on_toggle_sound_clicked(self) -> None:
        self.audio.toggle_sound()
        self.show_menu()

    # ------------------------------------------------------------------ #
    # ACTIONS
    # ------------------------------------------------------------------ #
    def start_level(self, index: int) -> None:
        self.close_overlay()
        self.racer.load_level(index)
        self._sync_level()

    def _restart(self) -> None:
        self.close_overlay()
        self.racer.restart()

    def _resume(self) -> None:
        self.close_overlay()
        if self.racer.paused:
            self.racer.toggle_pause()

    def _quit_to_menu(self) -> None:
        self.racer.quit_to_menu()
        self.audio.handle_events(self.racer.tick(TickInput()).events)
        self.show_menu()

    # ------------------------------------------------------------------ #
    # INPUT
    # ------------------------------------------------------------------ #
    def _on_key_down(self, event) -> None:
        binding = KEY_BINDINGS.get(event.keysym.lower())
        if isinstance(binding, Direction):
            self.pressed.add(binding)
        elif binding is Action.PAUSE:
            self.pending_pause = True

    def _on_key_up(self, event) -> None:
        binding = KEY_BINDINGS.get(event.keysym.lower())
        if isinstance(binding, Direction):
            self.pressed.discard(binding)
        elif binding is Action.RESTART and self.racer.status is not GameStatus.WAITING:
            self.pending_restart = True  # Respawn on release
            self.close_overlay()

    def _read_input(self) -> TickInput:
        tick_input = TickInput(thrust=thrust_from_directions(self.pressed),
                               restart=self.pending_restart, pause=self.pending_pause)
        self.pending_restart = False
        self.pending_pause = False
        return tick_input

    # ------------------------------------------------------------------ #
    # RENDERING
    # ------------------------------------------------------------------ #
    def _sync_level(self) -> None:
        """Redraw the static geometry when the level changes."""
        ctx = self.racer.ctx
        for item in self.wall_items:
            self.delete(item)
        self.wall_items = []
        for wall in ctx.walls:
            item = self.create_rectangle(0, 0, 0, 0, fill="#f5f5f5", outline="")
            self._place_box(item, wall.center, wall.size)
            self.wall_items.append(item)
        self._place_box(self.pad_item, ctx.launch_pad.center, ctx.launch_pad.size)
        self.tag_raise(self.pad_item)
        self.tag_raise(self.goal_item)
        self.tag_raise(self.ghost_item)
        self.tag_raise(self.ship_item)
        self.tag_raise(self.gizmo_item)
        self.drawn_level = ctx.current_level
        self.level_txt.set(self.racer.level.name)

    def render(self, result: TickResult) -> None:
        if result.status is GameStatus.WAITING:
            return
        if self.drawn_level != self.racer.ctx.current_level:
            self._sync_level()

        self.itemconfigure(self.pad_item, fill="#00ff00" if result.pad_armed else "#005500")
        self._place_box(self.goal_item, result.goal_marker, (GOAL_SIZE, GOAL_SIZE))
        self._place_box(self.ghost_item, result.ghost_position, (SHIP_SIZE, SHIP_SIZE))
        self._place_box(self.ship_item, result.ship_position, (SHIP_SIZE, SHIP_SIZE))

        # Velocity gizmo, scaled up to be visible
        x, y, _ = result.ship_position
        vx, vy = result.ship_velocity
        x1, y1 = self.to_canvas(x, y)
        x2, y2 = self.to_canvas(x + vx * 5, y + vy * 5)
        self.coords(self.gizmo_item, x1, y1, x2, y2)

        self.status_txt.set(result.text)

    # ------------------------------------------------------------------ #
    # GAME LOOP
    # ------------------------------------------------------------------ #
    def _handle_events(self, result: TickResult) -> None:
        self.audio.handle_events(result.events)
        for event in result.events:
            if isinstance(event, NewHighscore):
                save_high_scores(self.racer.ctx.highscores, self.save_path)
            elif isinstance(event, LevelCompleted):
                self.show_completed()

    def _step(self) -> TickResult:
        was_paused = self.racer.paused
        result = self.racer.tick(self._read_input())
        if result.paused and not was_paused:
            self.show_pause()
        elif was_paused and not result.paused:
            self.close_overlay()
        self._handle_events(result)
        return result

    def _game_loop(self) -> None:
        """Fixed-timestep loop: simulate in 1/60 s steps, draw once per frame."""
        now = time.perf_counter()
        self.accumulator += now - self.last_time
        self.last_time = now

        # Drop time we can't catch up with rather than spiral
        self.accumulator = min(self.accumulator, self.MAX_CATCHUP_TICKS * FREQ)

        result = None
        while self.accumulator >= FREQ:
            self.accumulator -= FREQ
            result = self._step()
        if result is not None:
            self.render(result)

        self.after(self.FRAME_DELAY_MS, self._game_loop)
