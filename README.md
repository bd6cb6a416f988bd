# nmodexsd

`nmodexsd` lets you describe an XML grammar as Python objects and then:

- turn it into an XML Schema (XSD) document,
- validate XML files or strings against that schema, collecting errors,
  fatal errors and warnings,
- draw the grammar as Graphviz `dot` graphs, and render them to PDF or
  another format when the `dot` program is installed.

It depends on `lxml`.

## Building blocks

The node classes live in `nmodexsd.model`:

- `XsdSequence`: a named complex type. `add` takes elements, choices,
  regular expressions and intervals (they are kept in `children` in the
  order added, and also in `elements`, `choices`, `reg_exps` and
  `intervals`); an attribute passed to `add` goes to `add_attribute` and
  is kept in `attributes`. `add_elements` adds several elements in order.
  Anything else raises `TypeError`.
- `XsdEnumeration`: a simple type limited to the values in `values`,
  extended with `add`; iterating over it yields the values.
- `XsdInterval`: a simple type with an inclusive `minimum` and `maximum`.
  Bounds are stored as text; numeric bounds are stored as whole numbers
  (`0.0` becomes `"0"`).
- `XsdRegularExpression`: a simple type restricted by the pattern
  `reg_exp`.

Each node reports its kind through `node_type`, a `NodeType` member.

The package has no element, attribute or choice classes of its own. Any
object with the right members can be used:

- an attribute: `node_type == NodeType.ATTRIBUTE`, `name`, `type`,
  `required`;
- an element: `node_type == NodeType.ELEMENT`, `name`, `type`,
  `min_occurs`, `max_occurs`, and optionally `attributes` and
  `min_occurs_given` / `max_occurs_given`;
- a choice: `node_type == NodeType.CHOICE`, `name`, `elements`,
  `sequences`, and optionally `attributes`, `min_occurs`, `max_occurs`.

## The specification

`XsdSpecification` in `nmodexsd.specification` gathers the named types
into one grammar, kept per kind in `sequences`, `enumerations`, `choices`,
`intervals` and `reg_exps`. It starts with a set of common definitions:
poses, PID values, `rad`/`deg` and `true`/`false` enumerations, xy, xyz,
xyzg and min/max attribute groups, width/height/depth, names, positive
(non-zero) integers and decimals as patterns, and the unit interval.

`add` registers a further type; a type whose name is already taken in its
kind replaces the earlier one, which moves to the end of the list. `nodes`
records every addition in order. `set_root` names the sequence that
becomes the document's root element; the schema, the graph and the
validator all need one and raise `ValueError` without it.

```python
from dataclasses import dataclass

from nmodexsd.model import NodeType, XsdSequence
from nmodexsd.specification import XsdSpecification
from nmodexsd.validation import XsdValidator
from nmodexsd.xsd_generator import XsdGenerator


@dataclass
class Attribute:
    name: str
    type: str
    required: bool = False
    node_type = NodeType.ATTRIBUTE


spec = XsdSpecification()
root = XsdSequence("robot")
root.add(Attribute("name", "xs:string", True))
spec.add(root)
spec.set_root(root)

print(XsdGenerator(spec).to_string())

validator = XsdValidator(spec)
validator.parse('<robot name="r1"/>')   # True
validator.parse("<robot/>")             # False; see validator.errors
```

## Producing the schema

`XsdGenerator` in `nmodexsd.xsd_generator` builds the schema in the
`xs:` namespace with `elementFormDefault="qualified"`. Sequences and
choices become named complex types, enumerations, intervals and regular
expressions named simple types, and the root sequence the document
element. `to_string` returns it as pretty-printed, standalone UTF-8 XML;
`write(path)` saves it (by default to `nmode.xsd`) and returns the path.

## Validating documents

`XsdValidator` in `nmodexsd.validation` checks XML against the schema
generated from a specification:

- `read(filename)` validates a file; the name `"-"` reads standard input.
  A file that cannot be read is reported as a fatal error.
- `parse(xml)` validates a string or bytes.

Both return `True` when the document has neither errors nor fatal errors.
Each call replaces the messages of the previous one; they are available as
`errors`, `fatals` and `warnings`, formatted like
`"Error: <message> at line: <n>"`. `error_count()` gives the number of
errors plus fatal errors. Documents that are not well-formed produce fatal
errors; schema violations produce errors. `ValidationMessages` is the
container that collects them.

## Drawing the grammar

`nmodexsd.graph` builds `XsdGraph`, the tree of type usages starting at
the root sequence, made of `XsdGraphNodeInstance` objects. `get(parent,
name)` returns the child `name` of the first instance called `parent` that
has one, or the root; `find_node(name)` looks up the drawable node for a
named type. The drawable nodes are in `nmodexsd.graph_nodes`
(`XsdSequenceGraphNode`, `XsdEnumerationGraphNode`, `XsdIntervalGraphNode`,
`XsdRegularExpressionGraphNode`), all derived from `XsdGraphNode` in
`nmodexsd.graph_node`; each gives an HTML-table label with `custom_label`
and table rows with `content`.

`XsdGraphvizGenerator(spec).generate(parent, name, left_to_right, depth)`
in `nmodexsd.graphviz` returns `dot` source for the subtree found by
`get(parent, name)`, laid out left to right or top to bottom, going down
`depth` levels; a negative depth means no limit.

`write_dot_files(specification, filetype, targets, directory)` writes one
`.dot` file per `DotTarget` into `<directory>/dot` and returns their paths.
Without targets it draws the `edge` child of `mutation`. When the `dot`
executable is on the path, each file is also rendered to `filetype` (by
default `"pdf"`) into `<directory>/<filetype>`.

## Helpers

`nmodexsd.helpers` has string trimming (`ltrim`, `rtrim`, `trim`),
`sign`, the 3-D distance `dist` between objects with `x`, `y` and `z`,
and `rad_to_deg` / `deg_to_rad`.

## What it does not do

- There is no command-line program; everything is used from Python.
- Validation reports messages only. It does not turn a valid document
  into data objects.
- There is no timer or clock utility in the package.