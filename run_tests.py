#!/usr/bin/env python3
"""
Main test runner for interpt.

Runs a quick lexer -> parser smoke check, then the unittest suite under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_checks():
    """Run a handful of end-to-end parses and report as we go."""

    print("🚀 interpt Test Suite")
    print("=" * 60)

    try:
        from interpt.lexer.lexer import Lexer
        from interpt.parser.parser import Parser
        print("✅ All modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import interpt modules: {e}")
        return False

    checks = [
        ("let statements", "let x = 5;\nlet y = x * 2;", "let x = 5;let y = (x * 2);"),
        ("precedence", "a + b * c - d / e", "((a + (b * c)) - (d / e))"),
        ("functions and calls", "let add = fn(a, b) { a + b }; add(1, 2)",
         "let add = fn(a, b) { (a + b) };add(1, 2)"),
        ("conditionals", "if (a < b) { a } else { b }", "if ((a < b)) { a } else { b }"),
    ]

    for name, source, expected in checks:
        print(f"  🔧 Testing {name}...")
        lexer = Lexer(source)
        parser = Parser(lexer)
        program = parser.parse_program()
        if parser.errors:
            print(f"     ❌ Parser errors: {len(parser.errors)}")
            for message in parser.errors:
                print(f"        {message}")
            return False
        if str(program) != expected:
            print(f"     ❌ Expected {expected!r}, got {str(program)!r}")
            return False
        print(f"     ✅ {len(program.statements)} statement(s)")

    print("  ❌ Testing error handling...")
    parser = Parser(Lexer("let = 5; let y 3; let z = 1;"))
    program = parser.parse_program()
    if len(parser.errors) != 2 or len(program.statements) != 1:
        print(f"     ❌ Expected 2 errors and 1 statement, got "
              f"{len(parser.errors)} and {len(program.statements)}")
        return False
    print(f"     ✅ Caught {len(parser.errors)} expected errors and recovered")
    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_checks() and run_unit_tests()
    print()
    print("🎉 All tests PASSED!" if success else "❌ Some tests FAILED")
    sys.exit(0 if success else 1)
