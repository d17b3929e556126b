#!/usr/bin/env python3
"""
Test runner script for the ContentGem client project.

This script runs all tests and provides a summary of results.
"""

import sys
import unittest
from pathlib import Path


def discover_and_run_tests(pattern='test_*.py'):
    """Discover and run all tests under tests/."""
    script_dir = Path(__file__).parent
    test_dir = script_dir / 'tests'

    if not test_dir.exists():
        print(f"Tests directory not found: {test_dir}")
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(str(test_dir), pattern=pattern, top_level_dir=str(script_dir))

    runner = unittest.TextTestRunner(
        verbosity=2,
        stream=sys.stdout,
        descriptions=True,
        failfast=False
    )

    print("\n" + "="*70)
    print("RUNNING TESTS")
    print("="*70)

    result = runner.run(suite)

    # Print summary
    print("\n" + "="*70)
    print("TEST SUMMARY")
    print("="*70)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")

    if result.failures:
        print("\nFAILURES:")
        for test, traceback in result.failures:
            print(f"  {test}: {traceback}")

    if result.errors:
        print("\nERRORS:")
        for test, traceback in result.errors:
            print(f"  {test}: {traceback}")

    success = result.wasSuccessful()
    print(f"\nOverall result: {'PASSED' if success else 'FAILED'}")

    return success


def main():
    """Main entry point for the test runner."""
    if len(sys.argv) > 1:
        # Run a specific test file, e.g. test_polling.py
        test_file = sys.argv[1]
        if not test_file.endswith('.py'):
            test_file += '.py'
        print(f"Running tests from {test_file}")
        success = discover_and_run_tests(pattern=test_file)
    else:
        print("Running all tests...")
        success = discover_and_run_tests()

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
