"""
Tests for redirection.py module.

Tests cover:
- Redirection descriptor flags
- Extracting the operator and target from an argument vector
- Installing and restoring descriptor 1
"""

import gc
import os
import stat

import pytest
from lsh_shell.exceptions import RedirectionError
from lsh_shell.redirection import (
    CREATE_MODE,
    Redirection,
    RedirectedOutput,
    extract_redirection,
)


class TestRedirection:
    """Tests for the Redirection descriptor."""

    def test_truncate_flags(self):
        """Test '>' opens for truncation."""
        redirection = Redirection('out.txt')
        assert redirection.operator == '>'
        assert redirection.flags & os.O_TRUNC
        assert not redirection.flags & os.O_APPEND
        assert redirection.flags & os.O_CREAT

    def test_append_flags(self):
        """Test '>>' opens for appending."""
        redirection = Redirection('out.txt', append=True)
        assert redirection.operator == '>>'
        assert redirection.flags & os.O_APPEND
        assert not redirection.flags & os.O_TRUNC


class TestExtractRedirection:
    """Tests for extract_redirection()."""

    def test_no_operator(self):
        """Test a plain vector is returned unchanged."""
        assert extract_redirection(['ls', '-l']) == (None, ['ls', '-l'])

    def test_truncate(self):
        """Test '>' and its filename are removed."""
        redirection, argv = extract_redirection(['echo', 'hello', '>', 'out.txt'])
        assert redirection == Redirection('out.txt', append=False)
        assert argv == ['echo', 'hello']

    def test_append(self):
        """Test '>>' is recognised."""
        redirection, argv = extract_redirection(['echo', 'a', '>>', 'log'])
        assert redirection == Redirection('log', append=True)
        assert argv == ['echo', 'a']

    def test_tail_after_filename_is_dropped(self):
        """Test everything from the operator on is cut."""
        redirection, argv = extract_redirection(['echo', 'a', '>', 'f', 'b', 'c'])
        assert redirection.target == 'f'
        assert argv == ['echo', 'a']

    def test_first_operator_wins(self):
        """Test only the leftmost operator is used."""
        redirection, argv = extract_redirection(['echo', '>', 'first', '>>', 'second'])
        assert redirection == Redirection('first')
        assert argv == ['echo']

    def test_missing_filename(self):
        """Test an operator at the end is malformed."""
        with pytest.raises(RedirectionError) as exc_info:
            extract_redirection(['echo', 'hi', '>'])
        assert exc_info.value.operator == '>'
        assert exc_info.value.position == 2
        assert "expected filename after '>'" in str(exc_info.value)

    def test_missing_filename_append(self):
        """Test '>>' at the end is malformed."""
        with pytest.raises(RedirectionError, match="'>>'"):
            extract_redirection(['ls', '>>'])

    def test_operator_glued_to_word_is_not_an_operator(self):
        """Test only standalone tokens count."""
        assert extract_redirection(['echo', 'a>b']) == (None, ['echo', 'a>b'])

    def test_input_not_modified(self):
        """Test the caller's vector is left alone."""
        argv = ['echo', 'x', '>', 'f']
        extract_redirection(argv)
        assert argv == ['echo', 'x', '>', 'f']


class TestRedirectedOutput:
    """Tests for the RedirectedOutput context manager."""

    def test_writes_go_to_file(self, in_tmp_dir, capfd):
        """Test the yielded stream writes into the target."""
        with RedirectedOutput(Redirection('out.txt')) as stream:
            stream.write("hello\n")

        assert (in_tmp_dir / 'out.txt').read_text() == "hello\n"
        assert capfd.readouterr().out == ""

    def test_raw_fd_writes_go_to_file(self, in_tmp_dir, capfd):
        """Test descriptor 1 itself points at the target."""
        with RedirectedOutput(Redirection('out.txt')):
            os.write(1, b"raw\n")

        assert (in_tmp_dir / 'out.txt').read_text() == "raw\n"

    def test_stdout_restored(self, in_tmp_dir, capfd):
        """Test descriptor 1 is restored after the block."""
        with RedirectedOutput(Redirection('out.txt')) as stream:
            stream.write("inside\n")
        os.write(1, b"outside\n")

        assert capfd.readouterr().out == "outside\n"
        assert (in_tmp_dir / 'out.txt').read_text() == "inside\n"

    def test_restored_on_exception(self, in_tmp_dir, capfd):
        """Test restoration happens when the block raises."""
        with pytest.raises(RuntimeError):
            with RedirectedOutput(Redirection('out.txt')) as stream:
                stream.write("partial\n")
                raise RuntimeError("command failed")
        os.write(1, b"after\n")

        assert capfd.readouterr().out == "after\n"
        assert (in_tmp_dir / 'out.txt').read_text() == "partial\n"

    def test_restore_is_idempotent(self, in_tmp_dir, capfd):
        """Test calling restore twice does nothing the second time."""
        redirected = RedirectedOutput(Redirection('out.txt'))
        redirected.__enter__()
        redirected.restore()
        redirected.restore()
        os.write(1, b"ok\n")

        assert capfd.readouterr().out == "ok\n"

    def test_truncates_existing_file(self, in_tmp_dir, capfd):
        """Test '>' replaces previous contents."""
        (in_tmp_dir / 'out.txt').write_text("old contents\n")
        with RedirectedOutput(Redirection('out.txt')) as stream:
            stream.write("new\n")

        assert (in_tmp_dir / 'out.txt').read_text() == "new\n"

    def test_appends_to_existing_file(self, in_tmp_dir, capfd):
        """Test '>>' keeps previous contents."""
        (in_tmp_dir / 'out.txt').write_text("old\n")
        with RedirectedOutput(Redirection('out.txt', append=True)) as stream:
            stream.write("new\n")

        assert (in_tmp_dir / 'out.txt').read_text() == "old\nnew\n"

    def test_created_file_mode(self, in_tmp_dir, capfd):
        """Test a new file gets mode 0644 minus the umask."""
        umask = os.umask(0o022)
        os.umask(umask)
        with RedirectedOutput(Redirection('new.txt')):
            pass

        mode = stat.S_IMODE(os.stat(in_tmp_dir / 'new.txt').st_mode)
        assert mode == CREATE_MODE & ~umask

    def test_unopenable_target_leaves_stdout_alone(self, in_tmp_dir, capfd):
        """Test a failed open raises before descriptor 1 is touched."""
        with pytest.raises(OSError):
            with RedirectedOutput(Redirection('no/such/dir/out.txt')):
                pass
        os.write(1, b"still here\n")

        assert capfd.readouterr().out == "still here\n"

    def test_failed_write_does_not_reach_restored_stdout(self, capfd):
        """Test text buffered for a full device is dropped, not written to fd 1 later."""
        if not os.path.exists('/dev/full'):
            pytest.skip("/dev/full not available")
        redirected = RedirectedOutput(Redirection('/dev/full'))
        with redirected as stream:
            stream.write("hi\n")
            with pytest.raises(OSError):
                stream.flush()

        assert stream.closed
        del stream
        gc.collect()
        os.write(1, b"after\n")
        assert capfd.readouterr().out == "after\n"
