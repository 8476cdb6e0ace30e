"""Day 7: directory sizes reconstructed from a terminal session."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

DISK_SIZE = 70_000_000
REQUIRED_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000


class CommandType(Enum):
    """The kind of a terminal command."""

    INVALID = 0
    CD = 1
    LS = 2


_COMMAND_NAMES = {"cd": CommandType.CD, "ls": CommandType.LS}


@dataclass
class Command:
    """A command typed at the prompt, with its parameters and output lines."""

    command_type: CommandType
    parameters: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)

    def add_output(self, line: str) -> None:
        """Append a line of output produced by the command."""
        self.output.append(line)


def parse_command(line: str) -> Command:
    """Parse a prompt line such as '$ cd /' into a Command with no output."""
    tokens = line.split(" ")
    if len(tokens) < 2:
        raise ValueError(f"invalid command line: {line!r}")
    command_type = _COMMAND_NAMES.get(tokens[1], CommandType.INVALID)
    return Command(command_type, tokens[2:], [])


class NodeType(Enum):
    """Whether a node is a file or a directory."""

    INVALID = 0
    FILE = 1
    DIRECTORY = 2


@dataclass(eq=False)
class Node:
    """A file or directory in the reconstructed file system."""

    name: str
    node_type: NodeType
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list)

    def add_child(self, other: Node) -> None:
        """Add other as a child of this directory."""
        if self.node_type is not NodeType.DIRECTORY:
            raise ValueError("cannot add a child to a non-directory node")
        self.children.append(other)


def parse_node(line: str) -> tuple[str, int, NodeType]:
    """Parse an 'ls' output line into (name, size, node type)."""
    tokens = line.split(" ")
    if len(tokens) < 2:
        raise ValueError(f"invalid listing line: {line!r}")
    name = tokens[1]
    if tokens[0] == "dir":
        return name, 0, NodeType.DIRECTORY
    return name, int(tokens[0]), NodeType.FILE


class Context:
    """The state of the terminal: the tree seen so far and the working directory."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self.current: Node | None = None
        self._file_sizes: dict[Node, int] = {}

    def build(self, commands: Iterable[Command]) -> None:
        """Replay the commands to build up the file system tree."""
        for command in commands:
            if command.command_type is CommandType.CD:
                self._change_directory(command)
            elif command.command_type is CommandType.LS:
                self._list(command)
            else:
                raise ValueError("invalid command type")

    def directory_sizes(self) -> dict[Node, int]:
        """Return the total size of every directory under the root."""
        if self.root is None:
            raise ValueError("no root directory")
        sizes: dict[Node, int] = {}

        def visit(node: Node) -> int:
            total = 0
            for child in node.children:
                if child.node_type is NodeType.DIRECTORY:
                    total += sizes[child] if child in sizes else visit(child)
                else:
                    total += self._file_sizes.get(child, 0)
            sizes[node] = total
            return total

        visit(self.root)
        return sizes

    def _change_directory(self, command: Command) -> None:
        if not command.parameters:
            raise ValueError("cd needs a directory name")
        name = command.parameters[0]

        if name == "/":
            if self.root is None:
                self.root = Node("/", NodeType.DIRECTORY)
            self.current = self.root
            return

        if name == "..":
            if self.current is None or self.current.parent is None:
                raise ValueError("cannot go above the top directory")
            self.current = self.current.parent
            return

        target = None
        if self.current is not None:
            target = next(
                (
                    child
                    for child in reversed(self.current.children)
                    if child.name == name and child.node_type is NodeType.DIRECTORY
                ),
                None,
            )
        if target is None:
            target = Node(name, NodeType.DIRECTORY, parent=self.current)
            if self.current is not None:
                self.current.add_child(target)
        self.current = target

    def _list(self, command: Command) -> None:
        if self.current is None:
            raise ValueError("ls before any directory was entered")
        for line in command.output:
            name, size, node_type = parse_node(line)
            node = Node(name, node_type, parent=self.current)
            self.current.add_child(node)
            if node_type is NodeType.FILE:
                self._file_sizes[node] = size


def read_commands(lines: Iterable[str]) -> Iterator[Command]:
    """Yield each command with its output lines, up to the first blank line."""
    current: Command | None = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            break
        if line.startswith("$"):
            if current is not None:
                yield current
            current = parse_command(line)
        elif current is None:
            raise ValueError("output found before any command")
        else:
            current.add_output(line)
    if current is not None:
        yield current


def run(path: str) -> None:
    """Print the sum of small directories and the smallest one worth deleting."""
    context = Context()
    with open(path, encoding="utf-8") as handle:
        context.build(read_commands(handle))
    sizes = context.directory_sizes()

    part1 = sum(size for size in sizes.values() if size <= SMALL_DIRECTORY_LIMIT)
    print(f"Part 1: {part1}")

    unused = DISK_SIZE - sizes[context.root]
    target = REQUIRED_SPACE - unused
    part2 = min((size for size in sizes.values() if size > target), default=sys.maxsize)
    print(f"Part 2: {part2}")