from rustl.interpreter import Interpreter
from rustl.runtime_context import get_entry_file


def test_state_persists_across_eval_calls():
    itp = Interpreter()
    itp.eval("let x = 1; fn inc(n) { return n + 1; }")
    itp.eval("let y = inc(x);")
    assert itp.env.lookup("y") == 2


def test_run_returns_none_on_success(capsys):
    itp = Interpreter()
    assert itp.run('println("ok");') is None
    assert capsys.readouterr().out == "ok\n"


def test_run_flattens_errors_to_text():
    itp = Interpreter()
    assert itp.run("let a = b;") == "'b' is not defined"
    assert itp.run("let a = 1 + true;") == "Invalid operation: cannot apply '+' to Int and Bool"
    assert itp.run("let a = ;").startswith("Line 1:")


def test_errors_keep_earlier_mutations():
    itp = Interpreter()
    assert itp.run("let a = 1; let b = nope; let c = 3;") is not None
    assert itp.env.lookup("a") == 1
    assert "c" not in itp.env


def test_run_file_sets_entry_file(tmp_path, capsys):
    script = tmp_path / "main.rl"
    (tmp_path / "helper.rl").write_text('println("hidden"); let h = 7;', encoding="utf-8")
    script.write_text('import "./helper.rl"; println(h * 6);', encoding="utf-8")
    itp = Interpreter()
    assert itp.run_file(script) is None
    assert get_entry_file() == script
    assert capsys.readouterr().out == "42\n"


def test_run_file_missing(tmp_path):
    assert Interpreter().run_file(tmp_path / "absent.rl").startswith("Error opening file at")


def test_interpreter_without_builtins():
    itp = Interpreter(builtins=False)
    assert itp.run('println("x");') == "'println' is not defined"


DOWN = "fn down(n) { if n > 0 { y = down(n - 1); } return n; }"


def test_deep_recursion_completes():
    itp = Interpreter()
    assert itp.run(DOWN + " let r = down(300);") is None
    assert itp.env.lookup("r") == 300


def test_runaway_recursion_is_an_error_message():
    itp = Interpreter()
    assert itp.run(DOWN + " let r = down(1000000);") == (
        "Maximum recursion depth exceeded in fn down"
    )
    # The interpreter stays usable afterwards
    assert itp.run("let s = down(3);") is None
    assert itp.env.lookup("s") == 3


def test_undecodable_entry_file(tmp_path):
    script = tmp_path / "main.rl"
    script.write_bytes(b"\xff\xfe")
    assert Interpreter().run_file(script) == f"Error reading file at {script}: not valid UTF-8"
