"""Drawing surface with a bottom-left origin and the window that drives it."""

from __future__ import annotations

import math

import pygame

from dxball.events import ButtonState, MouseButton, SpecialKey, flip_y

__all__ = [
    "Canvas",
    "Window",
    "circle_points",
    "ellipse_points",
    "rectangle_corners",
    "scale_color",
]

_SPECIAL_KEYS = {
    pygame.K_F1: SpecialKey.F1,
    pygame.K_F2: SpecialKey.F2,
    pygame.K_F3: SpecialKey.F3,
    pygame.K_F4: SpecialKey.F4,
    pygame.K_F5: SpecialKey.F5,
    pygame.K_F6: SpecialKey.F6,
    pygame.K_F7: SpecialKey.F7,
    pygame.K_F8: SpecialKey.F8,
    pygame.K_F9: SpecialKey.F9,
    pygame.K_F10: SpecialKey.F10,
    pygame.K_F11: SpecialKey.F11,
    pygame.K_F12: SpecialKey.F12,
    pygame.K_LEFT: SpecialKey.LEFT,
    pygame.K_UP: SpecialKey.UP,
    pygame.K_RIGHT: SpecialKey.RIGHT,
    pygame.K_DOWN: SpecialKey.DOWN,
    pygame.K_PAGEUP: SpecialKey.PAGE_UP,
    pygame.K_PAGEDOWN: SpecialKey.PAGE_DOWN,
    pygame.K_HOME: SpecialKey.HOME,
    pygame.K_END: SpecialKey.END,
    pygame.K_INSERT: SpecialKey.INSERT,
}

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}

_FONT_SIZE = 16


def ellipse_points(x, y, a, b, slices=100):
    """Points around an ellipse centred at (x, y), stepping the angle by 2*pi/slices."""
    if slices <= 0:
        raise ValueError("slices must be positive")
    step = 2 * math.pi / slices
    points = []
    t = 0.0
    while t <= 2 * math.pi:
        points.append((x + a * math.cos(t), y + b * math.sin(t)))
        t += step
    return points


def circle_points(x, y, r, slices=100):
    """Points around a circle centred at (x, y)."""
    return ellipse_points(x, y, r, r, slices)


def rectangle_corners(left, bottom, dx, dy):
    """Corners of an axis-aligned rectangle, counter-clockwise from bottom-left."""
    right = left + dx
    top = bottom + dy
    return [(left, bottom), (right, bottom), (right, top), (left, top)]


def scale_color(r, g, b):
    """Map 0-255 colour components to 0-1 intensities."""
    return (r / 255, g / 255, b / 255)


def _to_byte(intensity):
    return round(min(max(intensity, 0.0), 1.0) * 255)


class Canvas:
    """Draws on a pygame surface using coordinates with the origin at bottom-left."""

    def __init__(self, surface):
        self.surface = surface
        self.color = (255, 255, 255)
        self._images = {}
        self._font = None

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    def _screen(self, x, y):
        return (x, self.height - 1 - y)

    def _screen_points(self, points):
        return [self._screen(px, py) for px, py in points]

    def clear(self):
        self.surface.fill((0, 0, 0))

    def set_color(self, r, g, b):
        """Set the drawing colour from 0-255 components."""
        self.color = tuple(_to_byte(v) for v in scale_color(r, g, b))

    def show_image(self, x, y, filename):
        """Draw an image file with its bottom-left corner at (x, y)."""
        image = self._images.get(filename)
        if image is None:
            image = pygame.image.load(str(filename))
            self._images[filename] = image
        self.surface.blit(image, (int(x), self.height - int(y) - image.get_height()))

    def text(self, x, y, string):
        """Draw a string whose baseline starts at (x, y)."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        rendered = self._font.render(str(string), False, self.color)
        top = self.height - int(y) - self._font.get_ascent()
        self.surface.blit(rendered, (int(x), top))

    def point(self, x, y, size=0):
        """Plot a point, optionally surrounded by a square of half-width ``size``."""
        self.surface.set_at((int(x), self.height - 1 - int(y)), self.color)
        if size > 0:
            left = int(x - size)
            right = math.ceil(x + size)
            bottom = int(y - size)
            top = math.ceil(y + size)
            rect = pygame.Rect(left, self.height - top, right - left, top - bottom)
            self.surface.fill(self.color, rect)

    def line(self, x1, y1, x2, y2):
        pygame.draw.line(self.surface, self.color, self._screen(x1, y1), self._screen(x2, y2))

    def polygon(self, xs, ys):
        """Outline a closed polygon; fewer than three vertices draws nothing."""
        points = list(zip(xs, ys))
        if len(points) < 3:
            return
        pygame.draw.lines(self.surface, self.color, True, self._screen_points(points))

    def filled_polygon(self, xs, ys):
        """Fill a polygon; fewer than three vertices draws nothing."""
        points = list(zip(xs, ys))
        if len(points) < 3:
            return
        pygame.draw.polygon(self.surface, self.color, self._screen_points(points))

    def rectangle(self, left, bottom, dx, dy):
        corners = rectangle_corners(left, bottom, dx, dy)
        for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1]):
            self.line(ax, ay, bx, by)

    def filled_rectangle(self, left, bottom, dx, dy):
        xs, ys = zip(*rectangle_corners(left, bottom, dx, dy))
        self.filled_polygon(xs, ys)

    def circle(self, x, y, r, slices=100):
        self.ellipse(x, y, r, r, slices)

    def filled_circle(self, x, y, r, slices=100):
        self.filled_ellipse(x, y, r, r, slices)

    def ellipse(self, x, y, a, b, slices=100):
        points = [(x + a, y)] + ellipse_points(x, y, a, b, slices)
        pygame.draw.lines(self.surface, self.color, False, self._screen_points(points))

    def filled_ellipse(self, x, y, a, b, slices=100):
        points = [(x + a, y)] + ellipse_points(x, y, a, b, slices)[:-1]
        if len(points) < 3:
            return
        pygame.draw.polygon(self.surface, self.color, self._screen_points(points))

    def pixel_color(self, x, y):
        """Return the (r, g, b) colour of the pixel at (x, y)."""
        color = self.surface.get_at((int(x), self.height - 1 - int(y)))
        return (color.r, color.g, color.b)


class Window:
    """A window that feeds input to an application and redraws it continuously."""

    def __init__(self, width=500, height=500, title="iGraphics"):
        self.width = width
        self.height = height
        self.title = title
        self.fps = 60

    def _dispatch(self, app, event):
        if event.type == pygame.KEYDOWN:
            special = _SPECIAL_KEYS.get(event.key)
            if special is not None:
                app.special_keyboard(special)
            elif event.unicode:
                app.keyboard(event.unicode)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _MOUSE_BUTTONS.get(event.button)
            if button is None:
                return
            state = ButtonState.DOWN if event.type == pygame.MOUSEBUTTONDOWN else ButtonState.UP
            mx, my = event.pos
            app.mouse(button, state, mx, flip_y(self.height, my))
        elif event.type == pygame.MOUSEMOTION and any(event.buttons):
            mouse_move = getattr(app, "mouse_move", None)
            if mouse_move is not None:
                mx, my = event.pos
                mouse_move(mx, flip_y(self.height, my))

    def run(self, app, timers=None):
        """Open the window and loop until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            canvas = Canvas(surface)
            canvas.clear()
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    self._dispatch(app, event)
                elapsed = clock.tick(self.fps)
                if timers is not None:
                    timers.tick(elapsed)
                app.draw(canvas)
                pygame.display.flip()
        finally:
            pygame.quit()