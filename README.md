# dodgeball

A small arcade game built on pygame. You control a blue ball that starts in
the middle of the window while red balls bounce off the walls. Touch one and
the round is over. Survive as long as you can to build up your score.

## Installing

```
pip install .
```

## Playing

```
dodgeball
```

Options:

- `--width`, `--height`: window size in pixels (default 1280 x 720; both
  must be positive)
- `--score-file`: where the highest score is kept (default
  `player_data.txt` in the working directory)
- `--assets`: directory holding the images and font (default `assets`)
- `--seed`: seed for the random number generator, for repeatable games

The main menu shows your highest score so far. Click **Play** to start.
Each round opens with a countdown showing 4, 3, 2, 1, one number per second;
the ten opening enemies are already on the field but do not move until the
countdown ends.

Controls:

- **W / A / S / D**: move; the ball is kept inside the window.
- **Space** (hold): turn into a hole that enemies pass straight through.
  While a hole you cannot be hit, but you cannot pick up power-ups either.
  This burns fuel, shown by the bar in the top-right corner. Fuel does not
  refill while it lasts; only once it has run out completely does it refill,
  and you must wait until it is full again before you can use it.
- **Escape**: pause or resume a running round (ignored during the
  countdown). The pause menu has **Resume** and **Quit** buttons.

Scoring and difficulty:

- You gain 10 points every 1.5 seconds while the round is running.
- A new enemy appears every 10 seconds, never closer than 100 pixels to the
  centre of the window.
- A power-up appears every 13 seconds:
  - *Speed boost*: 1.5 times movement speed for 7 seconds.
  - *Freeze*: enemies move at half speed for 5 seconds.
  When a power-up runs out, the speed it changed goes back to its original
  value. The power-ups you have active are shown at the top of the screen.

When you are hit, the game-over screen shows your score and your highest
score. Click **Play Again** to start over or **Quit** to leave.

The score file is created with `0` on start-up if it does not exist. It is
overwritten at the end of a round whose score beats the stored one. A score
file that does not hold a non-negative whole number is an error.

## What is not included

The package does not ship any images or a font. Put them under the assets
directory (`sprites/ball_blue_small.png`, `sprites/hole.png`,
`sprites/ball_red_small.png`, `sprites/ball_red_large.png`,
`sprites/speed_boost.png`, `sprites/test_power.png` and
`fonts/FiraSans-Bold.ttf`). Missing images are drawn as grey squares and a
missing font falls back to pygame's default face. There is no sound.

## Using it from code

The game lives in `dodgeball.app.DodgeBall`: `update()` advances it by one
frame given the keys held and changed, `draw()` renders a frame onto a pygame
surface, and `run()` opens the window and plays. `dodgeball.app.main` is the
entry point for the command above.

The game logic can be driven without a window:

- `dodgeball.states`: `AppState`, `GameState`, `StateMachine`
- `dodgeball.timing`: `Timer`, `TimerMode`, `Countdown`
- `dodgeball.score`: `Score`, `read_high_score`, `write_high_score`
- `dodgeball.enemy`: `Enemy`, `EnemySpeed`, `EnemySwarm`
- `dodgeball.player`: `Player`, `PlayerSpeed`, `Fuel`, `ActivePowerups`,
  `FreezeEvent`
- `dodgeball.powerups`: `Powerup`, `PowerupKind`, `PowerupItem`,
  `PowerupSpawner`

The screens are in `dodgeball.menus` (`Menu`, `main_menu`,
`game_over_menu`), `dodgeball.hud` (`Hud`, `PauseMenu`, `CountdownOverlay`)
and `dodgeball.widgets` (`Button`, `Assets`).

Running the tests:

```
pip install ".[test]"
pytest
```