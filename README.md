# klondike

Klondike solitaire on a graphical table, played with the mouse. The table is drawn with pygame.

## Installing

```
pip install .
```

## Playing

```
klondike
```

Options:

- `--resources DIR` sets the directory that holds the images and sounds. The default is `resource`, relative to the directory the game is started from.
- `--seed N` sets the seed for the shuffle, so the same deal comes back every time.

Every image is loaded when the game starts. If one is missing or cannot be read, the command exits with status 84. It also exits with 84 on any other failure, and with 0 when the window is closed normally. Sounds are looked for as `sounds/cardPlace.ogg` and `sounds/cardSlide.ogg` under the resource directory. They are only played when audio is available.

The window opens at 1400×900. It can be made larger, but no smaller. The table is laid out like this:

- **Top left:** the four foundations, one per suit: diamonds, clubs, hearts, spades. Each builds up from ace to king.
- **Top right:** the hand. Click the face-down stock to turn over the next card. After the last card, the stock turns back to no card shown. Click the face-up card to select it.
- **Below:** the seven tableau piles.
  - Click a face-up card to select it together with every card lying over it.
  - Then click the last card of another pile to move the selection there.
  - A move is allowed onto a card of the other colour whose value is one higher.
  - Only a king can go onto an empty pile.
  - The last card of each pile is turned face up automatically.
- **Foundations:** to play a selected card to one, click it. A card taken from a pile must be the last card of that pile.
- **Icons on the right:** the speaker turns the sound effects on and off. The arrow deals a new game.

Clicking anywhere else clears the current selection. The game is won once all four foundations are topped by kings; a win image is then shown.

## Using the game logic in code

The rules do not depend on the display:

```python
import random
from klondike.game import Klondike

game = Klondike(rng=random.Random(1), on_sound=None)
game.click(1100, 100)   # turn over the next hand card
print(game.is_game_won())
```

`Klondike` keeps the stock in `hand`, the tableau in `piles` and the foundations in `goals`. It offers these methods:

- `reset`
- `click`
- `hand_next`
- `select_hand`
- `select_goal`
- `select_pile`
- `action`
- `hand_to_pile`
- `pile_to_pile`
- `is_card_valid`
- `show_last_cards`
- `switch_sound`
- `is_game_won`

`on_sound` is called with a `SoundEffect` and whether sound is switched on.

`klondike.cards` provides `Card`, `Suit`, `Color`, `new_deck()`, `shuffle_deck()` and `describe_deck()`.

`klondike.app` holds the window: `KlondikeWindow`, `Assets` and `main()`.

## What it does not do

There is no undo, no scoring or timer, and no saving of a game in progress. Cards are only moved by clicking, not by dragging. The stock turns over one card at a time.