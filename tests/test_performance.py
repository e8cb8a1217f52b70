import time

from tagtree.parser import MarkupParser

# --- Benchmark Function ---

def run_benchmark(body):
    parser = MarkupParser(body=body)
    start_time = time.perf_counter()
    root = parser.parse()
    end_time = time.perf_counter()
    return {
        'root': root,
        'errors': parser.errors,
        'total_time': end_time - start_time,
    }

# --- Tests ---

def test_stray_characters_in_attributes_parse_in_linear_time():
    """A long run of stray characters inside one tag stays cheap."""
    num_chars = 200000
    results = run_benchmark("<a " + "/\n" * num_chars + ">")

    print(f"\n--- {num_chars} stray attribute characters ---")
    print(f"Total time: {results['total_time']:.4f}s")
    print(f"Errors recorded: {len(results['errors'])}")

    codes = [error.code for error in results['errors']]
    assert codes == ["unexpected-character-in-attributes", "eof-in-element"]
    assert results['root'].children[0].attributes == {}
    assert results['total_time'] < 5.0


def test_many_stray_open_brackets_parse_in_linear_time():
    """Every stray '<' is reported, each with a cheap location lookup."""
    num_brackets = 50000
    results = run_benchmark("1 < 2\n" * num_brackets)

    print(f"\n--- {num_brackets} stray '<' characters ---")
    print(f"Total time: {results['total_time']:.4f}s")
    print(f"Errors recorded: {len(results['errors'])}")

    assert len(results['errors']) == num_brackets
    last = results['errors'][-1]
    assert (last.line, last.column) == (num_brackets, 3)
    assert results['total_time'] < 5.0
