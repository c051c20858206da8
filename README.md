# timesupporter

Game logic for a side-scrolling action game. It covers collision, attacks,
items, event conditions, input recording and save files. No rendering or
audio backend is attached. Characters, their actions, their brains and the
world are not part of the package: you pass in your own objects, and the
package reads and sets their attributes. The shapes it expects are written
down as `typing.Protocol` classes in each module.

## Modules

- `timesupporter.objects` holds the stage geometry. `Object` is the abstract
  base: a bounding box `x1, y1, x2, y2` and an `hp`, where `-1` means the
  object cannot be destroyed. `decrease_hp(damage_value, id)` counts each
  attack id once. `atari_drop_box(...)` returns `(landed, vx, vy)`.
  `BoxObject` is a solid rectangle. It lands, blocks and pushes characters
  out through their controller (`atari`, `penetration`), and it is damaged by
  other objects that hit it (`atari_from_object`).
- `timesupporter.slopes` provides `TriangleObject`, a right-triangle slope.
  `get_y(x)` gives the height of its surface. `left_down` picks the
  direction of the slope.
- `timesupporter.attacks` provides `AttackInfo` (a dataclass of attack
  parameters), `BulletObject`, `ParabolaBullet` and `SlashObject`.
  - Attacks never hit their owner, their own group or neutral characters
    (group `-1`).
  - A bullet vanishes once its range runs out. A parabolic bullet falls
    under gravity `G = 2`. A slash lasts `slash_count_sum` frames.
  - `create_attack_energy()` can release an `EnergyItem`.
- `timesupporter.bombs` provides three classes:
  - `BombObject`: a blast whose damage falls off with distance
    (`calc_damage_rate`). It only deals damage during animation frames 3 to 5
    (`able_damage`).
  - `DoorObject`: shows its hint text while a grounded character touches it.
  - `StageObject`: a door that leads nowhere.
- `timesupporter.items` provides `CureItem`, `MoneyItem` and `EnergyItem`,
  with `ItemCode`. Items fall under gravity (energy items float) and are
  flagged for deletion after `erase_cnt` frames. `atari_character(player)`
  applies the item when it overlaps the player: `hp`, `money` or
  `skill_gage`.
- `timesupporter.controller_recorder` provides `ControllerRecorder`, which
  stores input per frame as runs of `ControllerRecord`.
  - `write_record` and `add_time` record input.
  - `init`, `check_input` and `exist_record` replay it.
  - `discard_record` drops what was recorded after the current frame.
  - `set_goal` and `get_goal` store an attack target with a record.
- `timesupporter.control` holds the input counters. `KeyState.update(pressed_keys)`
  and `MouseState.update(left, right)` count how many frames each key or
  button has been held. `KeyState.pressed_once(key)` is true on the first
  frame only. `Key` lists the key codes the game reads. `mouse_limit(x, y)`
  clamps the cursor's x to a 640×480 area.
- `timesupporter.csv_reader` reads the game's data files. `CsvReader` reads
  a table with a header line and offers `find_one` and `data`.
  `DomainCsvReader` reads a file split into `DOMAIN:` sections, each with its
  own header line, and offers `get_domain_data`. Both classes have
  `from_lines` for text that is already in memory. Cells are split on commas
  only, with no quoting.
- `timesupporter.character_controller` links a brain to an action.
  - `CharacterController` passes a brain's orders on to a character action.
  - `NormalController` turns them into movement, jumps, boosts, squats,
    steps, bullet, slash and sliding attacks.
  - `create_controller(name, brain, action)` builds a controller by name.
  - `check_and_push_damaged_object_id` makes each hit count once.
- `timesupporter.event_fires` holds the conditions that start an event:
  `CharacterPointFire`, `CharacterNearFire`, `AutoFire` and `NonFire`. They
  are built from a parameter list with `create_fire(param, world)`.
- `timesupporter.game_data` provides `GameData`.
  - It keeps little-endian 32-bit binary files: the cleared-stage count and
    money in `<save path>intDataNew.dat`, and volume and resolution in a
    shared settings file.
  - `save` raises `OSError` on failure.
  - `load` returns `False` when a file is missing.

## Example

```python
from timesupporter.controller_recorder import ControllerRecorder

recorder = ControllerRecorder(0)
for pressed in (1, 1, 0):
    recorder.write_record(pressed)
    recorder.add_time()

recorder.init()
replayed = []
while recorder.exist_record():
    replayed.append(recorder.check_input())
    recorder.add_time()
# replayed == [1, 1, 0]
```

```python
from timesupporter.csv_reader import DomainCsvReader

reader = DomainCsvReader.from_lines([
    "CHARACTER:,",
    "name,x,y",
    "hero,100,200",
])
reader.get_domain_data("CHARACTER:")  # [{"name": "hero", "x": "100", "y": "200"}]
```

## What it does not do

- There is no game loop, window, command-line program, drawing or sound.
  Objects expose picture and sound paths (`graph_path`, `sound_path`) but
  never load them.
- There are no characters, character actions, brains or worlds. You supply
  them.
- Events stop at their start conditions. Nothing here runs the steps of a
  scripted event once it has fired.

## Testing

```
pip install -e .[test]
pytest
```