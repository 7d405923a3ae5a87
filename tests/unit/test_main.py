"""
Test __main__ cli entrypoints / functions
"""
import json
import sys
from subprocess import PIPE
from subprocess import Popen

HDPATH = [sys.executable, "-m", "hdpath"]


def run(args, stdin=b"", config_dir=None):
    if config_dir is not None:
        args = args + ["--config-dir", str(config_dir)]
    with Popen(HDPATH + args, stdin=PIPE, stdout=PIPE, stderr=PIPE) as proc:
        stdout, stderr = proc.communicate(stdin)
        return proc.returncode, stdout.decode("utf8"), stderr.decode("utf8")


def test_help():
    returncode, stdout, _ = run(["-h"])
    assert returncode == 0, "retcode non-zero"
    assert "hdpath" in stdout


def test_parse(tmp_path):
    returncode, stdout, _ = run(
        ["parse", "M/84H/0H/0H/1/3", "--shape", "standard"], config_dir=tmp_path
    )
    assert returncode == 0, "retcode non-zero"
    assert stdout.strip() == "m/84'/0'/0'/1/3", "stdout unexpected"


def test_parse_json(tmp_path):
    returncode, stdout, _ = run(
        ["parse", "m/44'/60'/0'/0/1", "-s", "standard", "--json"], config_dir=tmp_path
    )
    assert returncode == 0, "retcode non-zero"
    assert json.loads(stdout) == {
        "path": "m/44'/60'/0'/0/1",
        "length": 5,
        "values": [
            {"hardened": True, "number": 44},
            {"hardened": True, "number": 60},
            {"hardened": True, "number": 0},
            {"hardened": False, "number": 0},
            {"hardened": False, "number": 1},
        ],
        "bytes": "058000002c8000003c800000000000000000000001",
        "purpose": "pubkey",
        "coin_type": 60,
        "account": 0,
        "change": 0,
        "index": 1,
    }


def test_parse_invalid(tmp_path):
    returncode, stdout, stderr = run(
        ["parse", "m/49/0'/1'/0/5", "--shape", "standard"], config_dir=tmp_path
    )
    assert returncode == 1, "retcode not 1"
    assert not stdout
    assert "ERROR" in stderr

    returncode, _, _ = run(["parse", "m/44''/0"], config_dir=tmp_path)
    assert returncode == 1, "retcode not 1"


def test_encode(tmp_path):
    returncode, stdout, _ = run(["encode", "m/44'/0'/0'/0/0", "-0x"], config_dir=tmp_path)
    assert returncode == 0, "retcode non-zero"
    assert stdout.strip() == "058000002c800000008000000000000000" + "00000000"


def test_decode(tmp_path):
    returncode, stdout, _ = run(
        ["decode", "-1x", "--shape", "account"],
        stdin=b"038000002c8000000080000000\n",
        config_dir=tmp_path,
    )
    assert returncode == 0, "retcode non-zero"
    assert stdout.strip() == "m/44'/0'/0'", "stdout unexpected"


def test_decode_wrong_shape(tmp_path):
    returncode, _, _ = run(
        ["decode", "-1x", "--shape", "standard"],
        stdin=b"038000002c8000000080000000\n",
        config_dir=tmp_path,
    )
    assert returncode == 1, "retcode not 1"


def test_address(tmp_path):
    returncode, stdout, _ = run(["address", "m/84'/0'/0'/x/x", "1", "3"], config_dir=tmp_path)
    assert returncode == 0, "retcode non-zero"
    assert stdout.strip() == "m/84'/0'/0'/1/3", "stdout unexpected"


def test_config_file_shape(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"shape": "short"}))
    returncode, _, _ = run(["parse", "m/44'/60'/0'/0/1"], config_dir=tmp_path)
    assert returncode == 1, "retcode not 1"
    returncode, stdout, _ = run(
        ["parse", "m/44'/60'/0'/0/1", "--shape", "custom"], config_dir=tmp_path
    )
    assert returncode == 0, "retcode non-zero"
    assert stdout.strip() == "m/44'/60'/0'/0/1"


def test_decode_invalid_hex(tmp_path):
    returncode, stdout, stderr = run(["decode", "-1x"], stdin=b"zz\n", config_dir=tmp_path)
    assert returncode == 1, "retcode not 1"
    assert not stdout
    assert "ERROR" in stderr
    assert "Traceback" not in stderr
