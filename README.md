# syslabs

A collection of small, self-contained operating-systems exercises as a Python
package: CPU scheduling policies, a memory-management simulator, a bounded
producer/consumer queue run by threads, a priority sort, a small calculator,
a client for an integer-list server, and the in-memory state of a chat server.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### CPU scheduling — `syslabs-schedsim`

```
syslabs-schedsim jobs.txt
syslabs-schedsim jobs.txt --quantum 4
```

Reads whitespace-separated integers in groups of six
(`pid burst arrival waiting turnaround priority`) and prints the per-job
burst, waiting and turnaround times and their averages under FCFS,
shortest-remaining-time-first, priority (highest value first) and round robin
(quantum 2 unless `--quantum` is given).

### Memory management — `syslabs-mmu`

```
syslabs-mmu requests.txt -F     # first fit (also -FIFO)
syslabs-mmu requests.txt -B     # best fit  (also -BESTFIT)
syslabs-mmu requests.txt -W     # worst fit (also -WORSTFIT)
```

Flags are case-insensitive. The first integer of the input is the partition
size. The rest are `pid size` pairs: a positive pid allocates `size` units, a
negative pid frees the memory held by that process, and `-99999` (or any other
non-positive pid that is not a free request) coalesces adjacent free blocks.
After each request the free and allocated block lists are printed; requests
that cannot be met print `Error: Not Enough Memory` or
`Error: Can't locate Memory Used by PID: <pid>`.

### Priority sort — `syslabs-prioritysort`

```
syslabs-prioritysort processes.csv
```

Skips a header line, reads `pid,arrival_time,priority` rows and prints each as
`pid (priority, arrival_time)`, ordered by priority (highest first), then
arrival time, then pid.

### Calculator — `syslabs-calculator`

```
syslabs-calculator
syslabs-calculator --a 10 --b 4
```

Prompts for an operation (0 add, 1 subtract, 2 multiply, 3 divide, 4 exit)
and applies it to the operands (6 and 3 by default). Division truncates
toward zero; dividing by zero prints an error and a result of 0.

### Restaurant — `syslabs-restaurant`

```
syslabs-restaurant
syslabs-restaurant --customers 5 --cooks 2 --orders 2 --capacity 10
```

Runs customers and cooks as threads sharing a bounded order queue (defaults:
50 customers, 10 cooks, 5 orders each, capacity 100). Customers place orders
for random menu items; cooks fulfil them until every expected order has been
handled, then each reports how many it filled.

### Linked-list client — `syslabs-listclient`

```
syslabs-listclient --host 127.0.0.1 --port 9001
```

Connects to a server speaking the integer-list protocol and sends one command
per line: `print`, `get_length`, `add_back <value>`, `add_front <value>`,
`add_position <index> <value>`, `remove_back`, `remove_front`,
`remove_position <index>`, `get <index>`, and `exit`. `menu` prints the list
of commands. Each reply is shown as `SERVER RESPONSE: ...`.

## Library use

```python
from syslabs.intlist import IntList
from syslabs.scheduling import Job, fcfs, sjf, priority, round_robin, format_metrics
from syslabs.mmu import MemoryManager, Policy, AllocationError, parse_policy
from syslabs.mmuinput import Request, parse_requests
from syslabs.blocklist import Block, BlockList
from syslabs.restaurant import Restaurant, Order, pick_random_menu_item
from syslabs.restaurant_sim import run_simulation
from syslabs.prioritysort import Process, parse_processes, sort_processes
from syslabs.chatstate import ChatRegistry
```

- `IntList` is an ordered list of integers with front, back and positional
  insertion and removal; out-of-range positions raise `IndexError`, and
  `str()` renders it as `1 -> 2 -> NULL`.
- `BlockList` keeps memory `Block`s ordered by address or size, merges
  adjacent blocks with `coalesce()`, and returns `None` or `-1` when a lookup
  finds nothing.
- `MemoryManager(partition_size, policy)` allocates, frees and coalesces
  blocks, raising `AllocationError` when a request cannot be met.
- `Restaurant(max_size, expected_num_orders)` blocks `add_order` while full
  and `get_order` while empty, returning `None` once all expected orders have
  been handled; `close()` raises `RuntimeError` if any remain.
- `ChatRegistry` holds users, rooms, room membership and direct-message links,
  with renaming via `rename_user`.

## What is not included

- There is no integer-list server; `syslabs-listclient` needs one listening
  elsewhere. `IntList` provides the list operations such a server would apply.
- There is no chat server or per-client session handling; `ChatRegistry` is
  only the shared state, with no sockets, message delivery or command parsing.
- There is no threaded matrix arithmetic command.