"""Default configuration values for funcbench.

This module centralizes all hard-coded default values used throughout
the application, making them easy to discover and modify.
"""

# Comparison target meaning "compare sub-benchmarks of the current checkout"
SELF_COMPARE_TARGET = "."

# Benchmark execution
DEFAULT_BENCH_FUNC = ".*"
DEFAULT_BENCH_TIME = "1s"
DEFAULT_GO_BINARY = "go"
DEFAULT_PACKAGES = "./..."

# Timeouts (seconds); 0 disables the bound
DEFAULT_TIMEOUT_SECONDS = 2 * 60 * 60
TIMEOUT_MAX_SECONDS = 24 * 60 * 60

# Secondary worktree directory, created inside the primary workspace root
DEFAULT_WORKTREE_DIR_NAME = "_funcbench-cmp"

# GitHub
DEFAULT_GITHUB_OWNER = "prometheus"
DEFAULT_GITHUB_REPO = "prometheus"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITHUB_REQUEST_TIMEOUT_SECONDS = 30.0
PULL_REQUEST_BRANCH = "pullrequest"
