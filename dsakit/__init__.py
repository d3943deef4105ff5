"""Classic data structures and algorithms: sorts, stacks, queues, heaps, lists, trees and strings."""

__version__ = "0.1.0"