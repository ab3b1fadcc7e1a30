# reindeer2021

Solvers for days 1 to 18 of a 2021 advent puzzle calendar: sonar sweeps,
submarine steering, binary diagnostics, bingo, hydrothermal vents,
lanternfish, crab alignment, seven-segment displays, smoke basins, syntax
scoring, octopus flashes, cave paths, transparent origami, polymers, chiton
risk, packet decoding, trick shots and snailfish arithmetic.

The package has no runtime dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command, `reindeer2021-day01` through
`reindeer2021-day18`. Give it the path of that day's puzzle input and it
prints the answers to both parts:

```
reindeer2021-day01 input.txt
reindeer2021-day07 input.txt
reindeer2021-day18 input.txt
```

Days 1 to 3 need the path; run without one, they print a reminder and stop.
From day 4 on, the path defaults to `input.txt` in the current directory.
Where an input cannot be parsed, those later commands print
`failed to parse PartOne` (or `PartTwo`) with the reason.

Day 13's second part prints the folded paper as ASCII art, which spells out
the answer. Day 16 also prints how long each part took.

## As a library

Each day lives in its own module, `reindeer2021.day01` to
`reindeer2021.day18`, and exposes `part_one` and `part_two`:

```python
from reindeer2021 import day01, day06, day07, day16

day01.part_one([199, 200, 208, 210, 200, 207, 240, 269, 260, 263])  # 7
day06.part_one("3,4,3,1,2")                                          # 5934
day07.part_one(day07.parse_positions("16,1,2,0,4,2,7,1,2,14"))       # 37
day16.part_two("C200B40A82")                                         # 3
```

What each takes depends on the day: day 1 takes a list of integers, day 7 a
list of positions (see `parse_positions`), days 4, 6, 13, 14, 16 and 17 the
whole input as a string, and the rest a list of lines. All return integers
except `day13.part_two`, which returns the drawing as a string.

Some days also expose the pieces the answers are built from, for example
`day05.count_overlaps`, `day06.load_state` and `day06.simulate`,
`day08.parse_entry` and `Entry.decode`, `day09.HeightMap`,
`day10.check_line` and `day10.autocomplete_score`, `day11.Grid.step`,
`day12.CaveSystem.count_paths`, `day13.Paper`, `day14.Polymer.insert_pairs`,
`day15.lowest_risk`, `day16.parse_packet` with `Packet.version_sum` and
`Packet.evaluate`, `day17.Probe` and `day17.Target`, or `day18.parse_pair`
with `Pair.add`, `Pair.reduce` and `Pair.magnitude`.

Invalid input raises `ValueError`.