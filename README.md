# hopstep

The core object model of a small game engine, as a plain Python library
with no outside dependencies.

## What it provides

- **Names** (`hopstep.names`): a `Name` stores its base text once in a
  shared `NamePool` and keeps any trailing number apart from it.
  `Name("Actor3")` stores `"Actor"` plus the number 3, and `to_string()`
  gives back `"Actor3"`. Two names are equal when both base and number match.
- **Reflection** (`hopstep.reflection`, `hopstep.properties`): `Struct` and
  `Class` describe a type's parent, properties and native functions.
  `StructBuilder.add_property`, `set_super` and `add_native_function` fill
  them in. `Reflected.static_class()` builds a class description lazily.
  Property kinds include `NumericProperty`, `BooleanProperty`,
  `CharacterProperty`, `StringProperty`, `EnumProperty`, `ArrayProperty`,
  `ClassProperty` and `ObjectPtrProperty`. Each reads and writes an
  attribute with `get_value` and `set_value` and renders it with
  `export_to_string`. Only numeric, boolean and character properties produce
  text; the others export an empty string.
- **Functions**: `Function.invoke(instance, *args)` pushes the arguments on
  a `FunctionCallFrame`. The `NativeFunction` body reads them back with
  `frame.pop_params(n)`.
- **Objects and garbage collection** (`hopstep.objects`,
  `hopstep.garbage_collector`): `new_object(cls, ...)` creates an object,
  gives it its class and registers it with the process-wide
  `GarbageCollector`. `do_garbage_collect()` marks everything reachable from
  objects whose `gc_root` is set, through their garbage-collectable
  properties, and removes the rest. `ObjectPtr` is a plain nullable
  reference. `WeakObjectPtr`, made by `make_weak_object_ptr`, checks the pool
  slot and serial number before it hands the object back. `World` and
  `StaticMesh` are ready-made object classes.
- **Delegates** (`hopstep.delegates`): a `Delegate` binds one lambda
  (`bind_lambda`), free function (`bind_static`) or method (`bind_method`),
  with optional payload values appended to every call. Each binding gets a
  fresh `DelegateHandle`.
- **Engine support**:
  - `VariadicStack` is a fixed-size byte stack for values packed with
    `struct` formats.
  - `LoggerBase` and `ConsoleLogger` write leveled, length-limited log
    lines, coloured on a terminal. Debug lines appear only when
    `debug=True`.
  - `StringOutputDevice` accumulates text.
  - `hopstep.core_globals` holds `App` (current and delta time),
    `CommandLine`, `PlatformTime`, `request_engine_exit` and
    `is_engine_exit_requested`.
  - `hopstep.paths` gives directory helpers based on the working directory.
  - `GameView` is a W/A/S/D camera that takes key events from a
    `MessageHandler`.

## Example

```python
from hopstep.names import Name
from hopstep.delegates import Delegate
from hopstep.objects import new_object, make_weak_object_ptr, do_garbage_collect, World

name = Name("Actor3")
print(name.to_string())            # Actor3

delegate = Delegate()
delegate.bind_lambda(lambda a, b: a + b)
print(delegate.execute(2, 3))      # 5

world = new_object(World)
weak = make_weak_object_ptr(world)
do_garbage_collect()               # world is not a root, so it is collected
print(weak.is_valid())             # False
```

## What it does not do

This is a library only. It has no window, renderer, engine loop or asset
importer, and no command to run. `World.init_world()` loads nothing and
returns `False`. `GameView` keeps a position and look direction but builds
no view or projection matrices. `engine_config_path()` returns an empty
string, and there is no configuration storage.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```