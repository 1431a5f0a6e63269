# fighter_anim

Attack animations and a character selection grid for a small fighting game,
drawn with pygame.

Each character has a rest image and three attacks of three frames each. Images
are looked up by file name in a directory you choose (the current directory by
default):

- `<name>_sel.jpeg`: the rest image
- `<name>_coup<attack>_<frame>.jpeg`: attack 1 to 3, frame 0 to 2

The selection screen uses each character's portrait, `<name>_sel.png`
(`Zoro_sel.png` for zoro). Sonic has no frames of its own and uses Itachi's.
Frames advance once more than 200 ms have passed since the last change.

Characters: aizen, archer, itachi, naruto, shoto, sonic, zoro, guerrier,
soigneur.

## Installing

    pip install .

For the tests:

    pip install .[test]
    pytest

## Commands

Show a character at rest in a 96 × 96 window (600 × 600 with `--large`). Keys
`1`, `2` and `3` play the matching attack once, after which the character
returns to rest. Close the window to quit:

    fighter-viewer itachi
    fighter-viewer aizen --large -d path/to/images

Loop the frames of one attack (1 by default) in a 600 × 600 window for a fixed
time (1000 ms by default), then close:

    fighter-loop guerrier
    fighter-loop guerrier 3 --duration 2000 -d path/to/images

Show every character's portrait in a 3 × 3 grid of 96 × 96 cells until the
window is closed:

    fighter-select -d path/to/images

If an image cannot be loaded, each command prints the error and exits with
status 1.

## Using it from Python

    from fighter_anim.roster import get_character, character_names
    from fighter_anim.animation import Action, AttackAnimation

    names = character_names()
    itachi = get_character("itachi")
    print(itachi.rest_image(), itachi.attack_image(2, 0))

    anim = AttackAnimation()
    anim.start(Action.ATTACK_2, now=0)
    anim.update(now=250)
    print(anim.current_frame(), anim.is_resting())

- `fighter_anim.animation`: `Action`, `AttackAnimation` (plays an attack once,
  then rests) and `LoopingAnimation` (cycles an attack's frames until its
  duration has passed).
- `fighter_anim.roster`: `Character`, `get_character`, `character_names` and
  `selection_image`.
- `fighter_anim.sprites`: `load_image`, `ImageLoadError`, `SpriteSet.load` to
  read a character's images, and `Fighter`, which can be triggered, updated and
  drawn onto a pygame surface.
- `fighter_anim.viewer.run_viewer`, `fighter_anim.loop_demo.run_loop` and
  `fighter_anim.selection.run_selection` open the windows the commands show and
  return what was drawn; `fighter_anim.selection.grid_positions` gives the
  cell corners of a grid.

## What it does not do

There is no command that plays a single attack once on its own and then closes
the window. To do that, use `AttackAnimation` or `Fighter` from Python, or play
the attack in `fighter-viewer` with keys `1` to `3`.