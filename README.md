# runikit

Small, self-contained building blocks from a unikernel design, written in
plain Python with no runtime dependencies.

## What is inside

| Module             | Contents |
|--------------------|----------|
| `runikit.bitcount` | `bitcount(value, width)`: number of set bits in an unsigned 16, 32, 64 or 128 bit value |
| `runikit.errno`    | `Errno`, an `IntEnum` of error codes with `description()`, and the `ErrnoError` exception |
| `runikit.config`   | `Config`, a frozen dataclass of sizes and limits with `stack_size()`, and `default_config(debug)` |
| `runikit.argsplit` | `split_args(text, max_count)`: splits a command line into arguments, honouring quotes |
| `runikit.alloc`    | The `Allocator`, `AllocatorExt` and `AllocatorState` interfaces, and `register`, `register_ext`, `register_state`, `get_default`, `get_default_ext`, `get_default_state` for the global defaults |
| `runikit.slist`    | `Slist` and `SlistNode`: singly linked list |
| `runikit.stailq`   | `Stailq` and `StailqNode`: singly linked tail queue |
| `runikit.dlist`    | `List` and `ListNode`: doubly linked list |
| `runikit.tailq`    | `Tailq` and `TailqNode`: doubly linked tail queue |
| `runikit.buddy`    | `BuddyAllocator` over a simulated memory region, and the helpers `log2_floor`, `min_power2` and `find_n_meta` |
| `runikit.sudoku`   | Sudoku generation, rule checking, hints and solving (`row_random`, `find_next_empty`, `fits`, `solve`, `dig_holes`, `add_num`, `del_num`, `hint`) and the `Sudoku` board |
| `runikit.keys`     | `Key`: keyboard event codes |
| `runikit.controls` | `InputEvent` and `Controller`, which turns key presses into cursor and selection moves and a pending input value |

## Examples

Count set bits:

```python
from runikit.bitcount import bitcount

bitcount(0b1011, 16)   # 3
```

A width other than 16, 32, 64 or 128, or a value that does not fit, raises
`ValueError`.

Split a command line:

```python
from runikit.argsplit import split_args

split_args('run "hello world" --fast', 64)   # ['run', 'hello world', '--fast']
```

Spaces, tabs, carriage returns, newlines and the letter `v` separate
arguments outside quotes; text after a NUL character is ignored. When the
last allowed argument begins, it takes the rest of the line verbatim.

Work with error codes:

```python
from runikit.errno import Errno, ErrnoError

Errno.NOMEM.description()          # 'Cannot allocate memory'
raise ErrnoError(Errno.INVAL)      # str(): '[INVAL] Invalid argument'
```

Read the configuration:

```python
from runikit.config import default_config

config = default_config()
config.stack_size()                        # 65536
default_config(debug=True).stack_size_scale  # 10
```

Link nodes into a tail queue:

```python
from runikit.tailq import Tailq, TailqNode

queue = Tailq()
queue.push_back(TailqNode(1))
queue.push_back(TailqNode(2))
[node.element for node in queue]   # [1, 2]
queue.pop_front()
queue.pop_back()
```

The lists are intrusive: you create the nodes, and operations that may change
the head or tail of a queue take the queue as `owner`; leaving it out when it
is needed raises `ValueError`.

Allocate from a buddy allocator:

```python
from runikit.buddy import BuddyAllocator
from runikit.alloc import register, get_default

heap = BuddyAllocator(4096)
address = heap.alloc(100, 8)       # a 128-byte block, or None when out of memory
heap.write(address, b"hello")
heap.read(address, 5)              # b'hello'
heap.free_size()                   # space left, metadata excluded
print(heap)                        # free blocks of every order
heap.dealloc_ext(address)          # size worked out from the metadata

register(heap)
get_default() is heap              # True
```

Play sudoku:

```python
import random
from runikit.sudoku import Sudoku

board = Sudoku()
board.generate(random.Random(7), 30)
print(board.render())
board.hint(random.Random(7))       # (row, col, value) or None
board.solve()
```

Drive the game state from key events:

```python
from runikit.controls import Controller, InputEvent, EV_KEY
from runikit.keys import Key

controller = Controller()
controller.handle(InputEvent(EV_KEY, Key.D, 1))   # selection moves one cell right
controller.handle(InputEvent(EV_KEY, Key.KEY_5, 1))
controller.take_input()                           # 5
```

## What it does not do

The sudoku modules hold the game logic and input state only. There is no
screen drawing, no reading of real input devices, no background threads and
no command to start a game; `Controller` reports cursor and selection moves
through its `on_cursor` and `on_select` callbacks, and `Sudoku.render()`
returns the board as text. `BuddyAllocator` manages a simulated region held
in a `bytearray`, not real memory.

## Running the tests

Install the `test` extra and run `pytest`.