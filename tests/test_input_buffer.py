from portfolio_term.input_buffer import InputBuffer


class TestInsert:
    def test_empty_initial_state(self):
        buf = InputBuffer()
        assert buf.text == ""
        assert buf.cursor == 0

    def test_insert_appends(self):
        buf = InputBuffer()
        buf.insert("l")
        buf.insert("s")
        assert buf.text == "ls"
        assert buf.cursor == 2

    def test_insert_at_cursor(self):
        buf = InputBuffer()
        buf.set_text("ecoh")
        buf.move_left()
        buf.move_left()
        buf.insert("h")
        assert buf.text == "echoh"
        assert buf.cursor == 3


class TestDeleting:
    def test_backspace(self):
        buf = InputBuffer()
        buf.set_text("help")
        buf.backspace()
        assert buf.text == "hel"
        assert buf.cursor == 3

    def test_backspace_at_start(self):
        buf = InputBuffer()
        buf.set_text("help")
        buf.move_home()
        buf.backspace()
        assert buf.text == "help"
        assert buf.cursor == 0

    def test_delete_under_cursor(self):
        buf = InputBuffer()
        buf.set_text("pwdd")
        buf.move_left()
        buf.delete()
        assert buf.text == "pwd"
        assert buf.cursor == 3

    def test_delete_at_end(self):
        buf = InputBuffer()
        buf.set_text("pwd")
        buf.delete()
        assert buf.text == "pwd"

    def test_kill_to_start(self):
        buf = InputBuffer()
        buf.set_text("echo hi")
        for _ in range(2):
            buf.move_left()
        buf.kill_to_start()
        assert buf.text == "hi"
        assert buf.cursor == 0

    def test_kill_to_end(self):
        buf = InputBuffer()
        buf.set_text("echo hi")
        buf.move_home()
        for _ in range(4):
            buf.move_right()
        buf.kill_to_end()
        assert buf.text == "echo"
        assert buf.cursor == 4


class TestMovement:
    def test_left_right_are_bounded(self):
        buf = InputBuffer()
        buf.set_text("ab")
        buf.move_right()
        assert buf.cursor == 2
        buf.move_home()
        buf.move_left()
        assert buf.cursor == 0

    def test_home_end(self):
        buf = InputBuffer()
        buf.set_text("date")
        buf.move_home()
        assert buf.cursor == 0
        buf.move_end()
        assert buf.cursor == 4


class TestSetAndClear:
    def test_set_text_moves_cursor_to_end(self):
        buf = InputBuffer()
        buf.set_text("projects")
        assert buf.cursor == 8

    def test_clear_returns_previous(self):
        buf = InputBuffer()
        buf.set_text("banner")
        assert buf.clear() == "banner"
        assert buf.text == ""
        assert buf.cursor == 0
