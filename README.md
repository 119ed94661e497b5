# gmdoc

`gmdoc` gathers source files from your project and writes them into one or
more Markdown documents. Each file goes into a fenced code block, and the
block is tagged with the file's language. A YAML configuration file says
which files go into which document.

## Installation

```
pip install .
```

This installs the `gmd` command. You can also run the same command with
`python -m gmdoc.cli`.

## Quick start

To create a starter configuration in the current directory, run:

```
gmd init
```

This writes `gmd-config.yaml`. If that file already exists, the command
reports it, leaves the existing file alone and exits with status 1.

To generate the documents, run:

```
gmd
```

With no options, `gmd` reads `./gmd-config.yaml` and writes its output under
`./gmd_ouput/`. It creates that directory if it is missing. You can change
both locations. Relative paths are taken from the current directory:

```
gmd --config path/to/config.yaml --output_dir docs/generated
```

The single-dash forms `-config` and `-output_dir` also work.

To show the usage summary, run:

```
gmd help
```

`gmd --help` and `gmd -h` show the same summary.

If the configuration file is missing or invalid, `gmd` prints the reason and
exits with status 1. It does the same if an output document cannot be
written.

## Configuration

```yaml
outputs:
  main_docs.md:
    - base_dir: "."
      include:
        - "*.go"
      exclude:
        - "test_*.go"
      exclude_dirs:
        - "gmd_output"
      section_heading: "Source Code"
      description: >
        This section contains source Go files and associated documentation.
```

Each key under `outputs` names a Markdown file to write in the output
directory. Its value is a list of rules. The rules run in order, and each
rule has these fields:

- `base_dir`: the directory to walk. The walk visits entries in sorted order.
- `include`: glob patterns matched against file names. A file is taken only
  if it matches at least one.
- `exclude`: glob patterns for file names to skip. These are checked before
  `include`.
- `exclude_dirs`: glob patterns for directory names. The walk does not go
  into a directory whose name matches.
- `section_heading`: if set, written as a `##` heading.
- `description`: if set, written as a `> NOTE:` block.

Each file appears under a `### File:` heading that shows its path relative
to the rule's `base_dir`. If several rules in one output document pick up
the same file, the file is written only the first time. A configuration
without an `outputs` section is rejected.

The code-block language comes from the file extension. For example, `.py`
gives `python`, `.go` gives `go` and `.yml` gives `yaml`. Unknown
extensions get `plaintext`.

The starter configuration from `gmd init` excludes directories named
`gmd_output`. The default output directory, however, is `gmd_ouput`. If you
keep the default output location, adjust `exclude_dirs` so that earlier
output is not picked up again.

## Library use

```python
from gmdoc.config import load_config
from gmdoc.processor import process_outputs

config = load_config("gmd-config.yaml")
process_outputs(config, "docs/generated")
```

`load_config` raises `gmdoc.config.ConfigError` when the file cannot be read
or is malformed. It returns a `Config`, whose `outputs` maps file names to
lists of `Rule` objects.

`gmdoc.processor` also provides these functions:

- `render_rules` returns the Markdown text for a list of rules without
  writing anything.
- `gather_files` lists the files that one rule's patterns select.
- `render_file` wraps one file in a code block.
- `language_for` gives the code-block language for a file path.