#!/usr/bin/env python3
"""
Test runner for the query tool backend
"""
import subprocess
import sys
import os


def run_pytest(args, label):
    print(f"\n📋 Running {label}...")
    result = subprocess.run(
        [sys.executable, "-m", "pytest", *args],
        capture_output=True, text=True
    )

    print(result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)

    if result.returncode != 0:
        print(f"❌ {label} failed with return code: {result.returncode}")
        return False
    return True


def run_tests():
    """Run the test suite"""
    print("🧪 Running Query Tool Tests...")
    print("=" * 50)

    if not run_pytest(["tests", "-v", "-m", "not integration"], "Unit Tests"):
        return False

    # Run integration tests if environment variable is set
    if os.getenv("PGQUERY_INTEGRATION_TEST"):
        if not run_pytest(["tests", "-v", "-m", "integration"], "Integration Tests"):
            return False
    else:
        print("\n⏭️  Skipping integration tests. Set PGQUERY_INTEGRATION_TEST=1 to run them.")

    print("\n✅ All tests completed successfully!")
    return True


if __name__ == "__main__":
    print("Query Tool Test Suite")
    print("=" * 50)

    # Check if we're in the right directory
    if not os.path.exists("pgquery"):
        print("❌ Error: Please run this script from the project root directory")
        sys.exit(1)

    if run_tests():
        print("\n🎉 All tests passed!")
        sys.exit(0)
    else:
        print("\n💥 Some tests failed!")
        sys.exit(1)
