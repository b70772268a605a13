import time
from datetime import datetime

from rich.console import Console

from . import basics, numbers, text_io
from .errors import DemoAbort


class DemoRunner:
    def __init__(self, console=None, resource_path=text_io.RESOURCE_NAME, rng=None):
        self.console = console or Console(highlight=False)
        self.resource_path = resource_path
        self.rng = rng
        self.timeline = []
        self.timeline_step = 1
        self.current_step = None
        self.input_text = ""
        self.resource_text = None
        self.sequence = [
            ('print-greeting', self._demo_println),
            ('constants', self._demo_constants),
            ('variables', self._demo_variables),
            ('compare-two-numbers', self._demo_compare),
            ('shadow-and-trim-a-string', self._demo_shadow),
            ('index-into-a-fixed-array', self._demo_array_access),
            ('destructure-a-tuple', self._demo_tuple_destructure),
            ('exercise-branches-and-loops', self._demo_control_flow),
            ('draw-a-bounded-random-integer', self._demo_random),
            ('parse-a-numeric-string-with-fallback', self._demo_parse_with_fallback),
            ('build-a-string-by-appending', self._demo_string_append),
            ('read-a-line-from-standard-input', self._demo_input),
            ('convert-a-string-to-a-number', self._demo_convert),
            ('read-a-bundled-text-resource', self._demo_bundled_text),
            ('read-a-text-resource-into-a-string', self._demo_text_file)
        ]

    def run(self):
        # each routine returns (category, message, metadata) for its timeline entry
        for name, routine in self.sequence:
            self.current_step = name
            started = time.perf_counter()
            try:
                category, message, metadata = routine()
            except DemoAbort as e:
                self.log_event(name, "failed", "ERROR", e.reason, started)
                raise
            self.log_event(name, "ok", category, message, started, metadata)
        self.current_step = None

    def _demo_println(self):
        for line in basics.greeting_lines():
            self._print(line)
        return "OUTPUT", "Greeting printed", None

    def _demo_constants(self):
        return "VALUES", "Constants bound", basics.constants()

    def _demo_variables(self):
        values = basics.variables()
        return "VALUES", f"{len(values)} variables bound", values

    def _demo_compare(self):
        result = basics.compare(1, 2)
        self._print(result)
        return "FLOW", f"1 compared with 2: {result}", {'result': result}

    def _demo_shadow(self):
        for line in basics.shadow_lines():
            self._print(line)
        return "VALUES", "Name rebound to trimmed text", None

    def _demo_array_access(self):
        a, b, c = basics.array_access()
        return "VALUES", "Array indexed", {'a': a, 'b': b, 'c': c}

    def _demo_tuple_destructure(self):
        return "VALUES", "Tuple destructured", basics.tuple_destructure()

    def _demo_control_flow(self):
        taken = basics.control_flow()
        return "FLOW", f"{len(taken)} branches taken", {'taken': taken}

    def _demo_random(self):
        value = numbers.draw_random(rng=self.rng)
        return "NUMBERS", f"Random value {value}", {'value': value}

    def _demo_parse_with_fallback(self):
        value = numbers.parse_or_default("123")
        return "NUMBERS", f"Parsed {value}", {'value': value}

    def _demo_string_append(self):
        s = basics.append_string()
        return "VALUES", f"Built '{s}'", None

    def _demo_input(self):
        self.input_text = ""
        self._print("Please enter some text:")
        # the first read ignores failure
        ok, text = text_io.read_line()
        if ok:
            self.input_text += text
        self._print("Please enter some more text:")
        self.input_text += self._expect(text_io.read_line())
        return "INPUT", "Lines read", {'length': len(self.input_text), 'first_read_ok': ok}

    def _demo_convert(self):
        value = self._expect(numbers.convert_to_number("  123  "))
        return "NUMBERS", f"Converted {value}", {'value': value}

    def _demo_bundled_text(self):
        text = self._expect(text_io.read_bundled_text())
        return "FILE", "Bundled text loaded", {'length': len(text)}

    def _demo_text_file(self):
        self.resource_text = self._expect(text_io.read_text_file(self.resource_path))
        return "FILE", f"Read {self.resource_path}", {'length': len(self.resource_text)}

    def _expect(self, result):
        ok, value = result
        if not ok:
            raise DemoAbort(self.current_step, value)
        return value

    def log_event(self, routine, outcome, category, message, started, metadata=None):
        self.timeline.append({
            'step': self.timeline_step,
            'routine': routine,
            'outcome': outcome,
            'category': category.upper(),
            'message': message,
            'elapsed': time.perf_counter() - started,
            'finished_at': datetime.now(),
            'metadata': metadata or {}
        })
        self.timeline_step += 1

    def get_timeline(self, limit=None):
        if limit is None or limit >= len(self.timeline):
            return list(self.timeline)
        return self.timeline[-limit:]

    def _print(self, message):
        self.console.print(message, markup=False, soft_wrap=True)
