[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "labstructs"
version = "1.0.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, trees, graphs, sorting and a small title search engine."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "binary search tree",
    "graph traversal",
    "sorting",
    "radix sort",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-animation = "labstructs.animation:main"
labstructs-linked-list = "labstructs.unordered_linked_list:main"
labstructs-doubly-linked-list = "labstructs.doubly_linked_list:main"
labstructs-stack = "labstructs.stack:main"
labstructs-sorting = "labstructs.sorting:main"
labstructs-radix-sort = "labstructs.radix_sort:main"
labstructs-bst = "labstructs.bst:main"
labstructs-graph = "labstructs.graph:main"
labstructs-intersect = "labstructs.set_ops:main"
labstructs-search = "labstructs.search_engine:main"

[tool.setuptools.packages.find]
include = ["labstructs*"]

[tool.pytest.ini_options]
addopts = "-ra"
