# katana

Building blocks for two-dimensional games on pygame: a sprite batch that
sorts and draws sprites and text, frame animations loaded from plain text
files, textures, render targets, fonts, audio samples, a particle pool,
menu items, and helpers for colours, points, timing and common maths.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `katana.mathutil`: `lerp`, `clamp`, `is_in_range`, `to_radians`,
  `to_degrees`, `random_int`, `random_float` and the constants `PI`,
  `PI_OVER2`, `PI_OVER4`, `INVERSE_PI`, `NORMALIZE_PI_OVER4`, `INVERSE_180`.
- `katana.color`: `Color`, a frozen RGBA colour with components in [0, 1].
  `Color.lerp(start, end, value)` interpolates, `color * scalar` scales every
  component, `to_rgba()` gives 8-bit components. The named colours
  (`Color.WHITE`, `Color.CORNFLOWER`, `Color.TRANSPARENT`, ...) are attributes
  of `Color` and are also listed in `NAMED_COLORS`.
- `katana.point`: `Point`, a mutable integer point with `+`, `-`, `+=`,
  `-=`, `set()`, `is_origin()` and `Point.ORIGIN`; `str()` gives `{ x, y }`.
- `katana.gametime`: `GameTime(clock)` tracks `total_time` and
  `elapsed_time`. Each `update()` reads the clock; a gap longer than 0.2
  seconds is logged as a warning and leaves `elapsed_time` unchanged.
- `katana.resource`: `Resource`, the abstract base of loadable assets
  (`load(path, manager)`, `clone()`, `cloneable`), and the line helpers
  `split`, `strip_comment` and `trim_line`.
- `katana.animation`: `Frame` and `Animation`. An animation steps through
  its frames as `update(game_time)` is called, with `play()`, `pause()`,
  `stop()`, `set_current_frame(index)` and `set_loop_count(loops)`
  (negative loops forever).
- `katana.texture`: `Texture`, an image loaded with `pygame.image.load`,
  with `width`, `height`, `size` and `center`.
- `katana.rendertarget`: `RenderTarget`, a texture that drawing can be
  redirected to. `RenderTarget.set_display(surface)` sets the surface used
  when no target is selected, `RenderTarget.set(target)` selects a target
  (or `None` for the display), `RenderTarget.current()` returns the surface
  drawing goes to.
- `katana.font`: `Font`, loaded from a font file, or from a `.png` glyph
  bitmap when loaded through a manager. `Font.set_load_size(size, restore)`
  and `Font.set_character_range(ranges)` configure the next load;
  `line_height`, `text_width(text)` and `render(text, rgba)` use it.
- `katana.audiosample`: `AudioSample`, played through the pygame mixer,
  with `play()`, `set_looping()`, a clamped `volume` and
  `AudioSample.reserve_samples(count)`.
- `katana.particlepool`: `ParticlePool(updater, renderer)` updates and
  draws the particles whose `is_active` is true, and
  `get_inactive_particle()` hands out one that is free for reuse.
- `katana.spritebatch`: `SpriteBatch`, with `TextAlign`, `SpriteSortMode`
  and `BlendState`. Calls to `draw`, `draw_animation` and `draw_string`
  between `begin()` and `end()` are queued and rendered at `end()`, sorted
  by depth for `BACK_TO_FRONT` and `FRONT_TO_BACK`, or rendered at once in
  `IMMEDIATE` mode. Drawing before `begin()` raises `RuntimeError`. The
  default renderer, `SurfaceRenderer`, draws onto `RenderTarget.current()`;
  any callable taking `(drawable, blend_state, transformation)` may be
  passed instead.
- `katana.menuitem`: `MenuItem`, a line of menu text with a font, colour,
  alpha, position, text offset and alignment. `draw(sprite_batch)` draws it
  and `select(menu_screen)` runs its `on_select` callback.

## Animation files

An animation file names its sprite sheet on the first line, the seconds per
frame on the second, and one frame per line after that as `x,y,width,height`.
Text after `//` on a line is a comment, and blank lines are skipped.

```
hero.png      // sprite sheet
0.1           // seconds per frame
0,0,32,32
32,0,32,32
64,0,32,32
```

`Animation.load(path, manager)` loads the sprite sheet with
`manager.load(Texture, name)`, so the manager can be any object with such a
method:

```python
from katana.animation import Animation


class Loader:
    def load(self, resource_type, path):
        resource = resource_type()
        resource.load(path, self)
        return resource


hero = Animation()
hero.load("hero.anim", Loader())
```

## Example

```python
import pygame

from katana.color import Color
from katana.gametime import GameTime
from katana.rendertarget import RenderTarget
from katana.spritebatch import SpriteBatch, SpriteSortMode

pygame.init()
screen = pygame.display.set_mode((800, 600))
RenderTarget.set_display(screen)

batch = SpriteBatch()
game_time = GameTime()

# hero is the Animation loaded above
game_time.update()
hero.update(game_time)

screen.fill((0, 0, 0))
batch.begin(SpriteSortMode.BACK_TO_FRONT)
batch.draw_animation(hero, (100, 100), color=Color.WHITE, draw_depth=1.0)
batch.end()
pygame.display.flip()
```

## What it does not do

The package has no game loop, no window or event handling, no keyboard,
mouse or gamepad input, no stack of screens with transitions, no menu screen
to hold `MenuItem`s, and no resource manager of its own. You write the loop
with pygame, call `update` and the sprite batch yourself, and pass any
object with a `load(resource_type, path)` method where a manager is needed.