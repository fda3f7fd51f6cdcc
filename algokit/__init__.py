"""Binary trees and traversals, linked lists, tree codecs, bucket hashing and small array and string puzzles."""

__version__ = "0.1.0"