"""lgdict - Link Grammar dictionary export for learned connector sets.

Turns connector sets (a germ word plus its ordered left/right connectors)
into the SQLite dictionary read by the Link Grammar parser.

Core concepts:
    - Every distinct word pair gets one short link name ("TA", "TB", ...)
    - Both ends of a link use the same name, with "-" or "+" for direction
    - Each connector set becomes one disjunct, connectors kept in order

Example:
    germ "dog", connectors [("the", LEFT), ("barks", RIGHT)]
    -> Morphemes ("dog", "dog.1", "dog")
    -> Disjuncts ("dog", "TA- & TB+", 0.0)

Usage:
    from lgdict.builder import ExportDriver
    from lgdict.ingest import JsonLinesSource

    driver = ExportDriver(JsonLinesSource("csets.jsonl"))
    stats = driver.export("data/en", locale="EN_us")
"""

__version__ = "0.1.0"
