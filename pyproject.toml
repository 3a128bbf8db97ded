[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Classic competitive-programming algorithms: string matching, suffix arrays, tries, union-find, centroid decomposition and tree DP."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "aho-corasick",
    "kmp",
    "z-function",
    "edit-distance",
    "suffix-array",
    "trie",
    "union-find",
    "kruskal",
    "fenwick-tree",
    "centroid-decomposition",
    "tree-dp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestkit-kmp = "contestkit.kmp:main"
contestkit-z = "contestkit.z_algorithm:main"
contestkit-edit-distance = "contestkit.edit_distance:main"
contestkit-aho-corasick = "contestkit.aho_corasick:main"
contestkit-suffix-array = "contestkit.suffix_array:main"
contestkit-trie = "contestkit.trie:main"
contestkit-union-find = "contestkit.union_find:main"
contestkit-bipartite = "contestkit.bipartite_union_find:main"
contestkit-centroid = "contestkit.centroid:main"
contestkit-tree-dp = "contestkit.tree_dp:main"
contestkit-distance-subset = "contestkit.distance_subset:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
