"""
Tests for pip, gem, Go and nvm adapters.
"""

from macos_bootstrap.lib import command as command_mod
from macos_bootstrap.lib import gem as gem_mod
from macos_bootstrap.lib import golang as golang_mod
from macos_bootstrap.lib import pip as pip_mod
from macos_bootstrap.lib.gem import gem_install, gem_installed
from macos_bootstrap.lib.golang import binary_name, go_install, go_tool_installed
from macos_bootstrap.lib.nvm import install_nvm, nvm_installed
from macos_bootstrap.lib.pip import canonical_name, pip_install, python_package_installed

FREEZE = "Virtualenv==20.24.0\nzope.interface==6.0\n-e git+https://example.invalid/x.git#egg=x\nrequests @ file:///tmp/requests\n"


class TestPip:
    def test_canonical_name(self):
        assert canonical_name("Zope.Interface") == "zope-interface"
        assert canonical_name("virtualenv_wrapper") == "virtualenv-wrapper"

    def test_probe_normalises_names(self, fake_run):
        fake_run(pip_mod, {("pip3", "freeze"): (0, FREEZE)})

        assert python_package_installed("virtualenv")
        assert python_package_installed("zope-interface")
        assert python_package_installed("requests")
        assert not python_package_installed("virtualenvwrapper")

    def test_pip_missing_counts_as_absent(self, fake_run):
        fake_run(pip_mod, {("pip3", "freeze"): (127, "")})

        assert not python_package_installed("virtualenv")

    def test_install_uses_sudo_by_default(self, fake_run):
        runner = fake_run(pip_mod)

        pip_install("virtualenv")
        pip_install("virtualenvwrapper", sudo=False)

        assert runner.argvs == [
            ["sudo", "pip3", "install", "virtualenv"],
            ["pip3", "install", "virtualenvwrapper"],
        ]
        assert all(c.capture is False for c in runner.calls)


class TestGem:
    def test_probe_reads_first_token(self, fake_run):
        fake_run(gem_mod, {("gem", "list"): (0, "bundler (2.4.10, default: 2.3.26)\nrake (13.0.6)\n")})

        assert gem_installed("bundler")
        assert gem_installed("rake")
        assert not gem_installed("rails")

    def test_install(self, fake_run):
        runner = fake_run(gem_mod)

        gem_install("rake", sudo=True)

        assert runner.argvs == [["sudo", "gem", "install", "rake"]]


class TestGo:
    def test_binary_name(self):
        assert binary_name("github.com/brancz/gojsontoyaml") == "gojsontoyaml"
        assert binary_name("golang.org/x/tools/cmd/goimports@v0.1.0") == "goimports"

    def test_install_defaults_to_latest(self, fake_run):
        runner = fake_run(golang_mod)

        go_install("github.com/brancz/gojsontoyaml")
        go_install("golang.org/x/tools/cmd/goimports@v0.1.0")

        assert runner.argvs == [
            ["go", "install", "github.com/brancz/gojsontoyaml@latest"],
            ["go", "install", "golang.org/x/tools/cmd/goimports@v0.1.0"],
        ]

    def test_probe_looks_in_gobin(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GOBIN", str(tmp_path))
        monkeypatch.setattr(golang_mod.shutil, "which", lambda name: None)

        assert not go_tool_installed("github.com/brancz/gojsontoyaml")
        (tmp_path / "gojsontoyaml").write_text("")
        assert go_tool_installed("github.com/brancz/gojsontoyaml")

    def test_probe_uses_gopath(self, monkeypatch, tmp_path, fake_run):
        monkeypatch.delenv("GOBIN", raising=False)
        monkeypatch.setattr(golang_mod.shutil, "which", lambda name: None)
        (tmp_path / "bin").mkdir()
        (tmp_path / "bin" / "gojsontoyaml").write_text("")
        fake_run(golang_mod, {("go", "env", "GOPATH"): (0, f"{tmp_path}\n")})

        assert go_tool_installed("github.com/brancz/gojsontoyaml")


class TestNvm:
    def test_probe_checks_nvm_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NVM_DIR", str(tmp_path))

        assert not nvm_installed()
        (tmp_path / "nvm.sh").write_text("")
        assert nvm_installed()

    def test_install_pipes_script_to_bash(self, fake_run):
        runner = fake_run(command_mod)

        install_nvm("https://raw.githubusercontent.com/nvm-sh/nvm/v0.38.0/install.sh", dry_run=True)

        call = runner.calls[0]
        assert call.dry_run is True
        assert call.argv[2].endswith("curl -fsSL https://raw.githubusercontent.com/nvm-sh/nvm/v0.38.0/install.sh | bash")

    def test_install_url_is_shell_quoted(self, fake_run):
        runner = fake_run(command_mod)

        install_nvm("https://example.invalid/install.sh; rm -rf ~", dry_run=True)

        assert "curl -fsSL 'https://example.invalid/install.sh; rm -rf ~' | bash" in runner.calls[0].argv[2]
