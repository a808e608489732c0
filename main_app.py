"""
Mission Tracker - Main Application

Interactive 2D solar-system map:
- Overview of the whole system, click a planet to focus it
- Mission pins around the focused planet and its moons
- Pan / zoom camera, pause and time-scale control

Usage:
    python main_app.py [--data system.json] [--time-scale 10]
                       [--moon-layout compressed|orbital]
                       [--width 1280] [--height 800]
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import pygame

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.config import MoonLayout, TrackerConfig
from universe.system import SolarSystem, build_solar_system, load_system
from ui_new.theme import get_theme
from ui_new.screen_tracker import TrackerScreen

# Window settings
WIDTH, HEIGHT = 1280, 800
FPS = 60
TITLE = "Mission Tracker"


class TrackerApp:
    """
    Main application

    Owns the window and the frame loop; the TrackerScreen does the rest.
    """

    def __init__(self, system: SolarSystem, config: Optional[TrackerConfig] = None,
                 width: int = WIDTH, height: int = HEIGHT):
        pygame.init()

        self.window_size = (width, height)
        self.fullscreen = False
        self.screen = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()
        self.tracker = TrackerScreen(system, config)
        self.tracker.on_enter()

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print(f"Bodies: {len(system)}  Missions: {len(system.missions)}")
        print("=" * 60)

    def run(self):
        """Main loop"""
        print("\nStarting main loop...")
        print("Close the window to quit\n")

        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_F11:
                        self.toggle_fullscreen()

                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

            self.tracker.handle_input(events)
            self.tracker.update(dt)

            self.screen.fill(self.theme.colors.BG_DARK)
            self.tracker.render(self.screen)
            pygame.display.flip()

        self.quit()

    def toggle_fullscreen(self):
        """Toggle between fullscreen and windowed mode"""
        self.fullscreen = not self.fullscreen

        if self.fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
            print(f"Switched to fullscreen: {width}x{height}")
        else:
            self.screen = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
            width, height = self.window_size
            print(f"Switched to windowed: {width}x{height}")
        self.tracker.on_resize(width, height)

    def handle_resize(self, width: int, height: int):
        """Handle window resize event"""
        if not self.fullscreen:
            self.window_size = (width, height)
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            self.tracker.on_resize(width, height)
            print(f"Window resized to: {width}x{height}")

    def quit(self):
        """Cleanup and quit"""
        print("\nShutting down...")
        self.tracker.on_exit()
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive solar-system mission tracker")
    parser.add_argument("--data", type=Path, default=None,
                        help="JSON file with 'root', 'bodies' and 'missions' tables")
    parser.add_argument("--time-scale", type=float, default=None,
                        help="simulated days per real second (default 10)")
    parser.add_argument("--moon-layout", choices=[m.value for m in MoonLayout],
                        default=MoonLayout.COMPRESSED.value,
                        help="moon placement in the overview")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    return parser


def config_from_args(args: argparse.Namespace) -> TrackerConfig:
    config = TrackerConfig(moon_layout=MoonLayout(args.moon_layout))
    if args.time_scale is not None:
        if args.time_scale < 0:
            raise ValueError(f"--time-scale must be >= 0, got {args.time_scale}")
        config = replace(config, time_scale=args.time_scale)
    return config


def main(argv: Optional[Sequence[str]] = None):
    """Entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        system = load_system(args.data) if args.data else build_solar_system()
    except (OSError, ValueError) as e:
        parser.error(str(e))

    try:
        app = TrackerApp(system, config, args.width, args.height)
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
