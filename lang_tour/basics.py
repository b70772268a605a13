FOO = 1
GOO = "Hello World"


def foo():
    return True


def echo(s):
    return s


def greeting_lines():
    return [
        "Hello",
        "Hello {} and {}".format("Alice", "Bob")
    ]


def constants():
    return {'FOO': FOO, 'GOO': GOO}


def variables():
    b = 1
    c = 1
    c += 1  # names can always be rebound
    c: int = 1
    d: float = 1.1
    letter = 'x'
    arr = [1, 2, 3]
    tup = (1, 1.1, 'x')
    f = str()
    g = "hello"
    return {
        'b': b,
        'c': c,
        'd': d,
        'letter': letter,
        'arr': arr,
        'tup': tup,
        'f': f,
        'g': g,
        'decimal': 98_222,
        'hex': 0xff,
        'octal': 0o77,
        'binary': 0b1111_0000,
        'byte': b'A'[0]
    }


def compare(x, y):
    if x < y:
        return "less"
    if x > y:
        return "greater"
    return "equal"


def shadow_lines(x="    hello     "):
    lines = [f"x is {x} before trimming"]
    x = x.strip()
    lines.append(f"x is {x} after trimming")
    return lines


def array_access(arr=(1, 2, 3)):
    a = arr[0]
    b = arr[1]
    c = arr[2]
    return a, b, c


def tuple_destructure(tup=(1, 1.1, 'x')):
    a, b, c = tup
    return {'a': a, 'b': b, 'c': c}


def control_flow(a=True, b=True, c=True, items=(1, 2, 3)):
    taken = []
    if a:
        taken.append("if")
    if a:
        taken.append("if-else:if")
    else:
        taken.append("if-else:else")
    if a:
        taken.append("chain:a")
    elif b:
        taken.append("chain:b")
    elif c:
        taken.append("chain:c")
    else:
        taken.append("chain:else")
    while True:
        taken.append("loop")
        break
    while a:
        taken.append("while")
        break
    for item in items:
        taken.append(f"for:{item}")
    return taken


def append_string(base="hello"):
    s = base
    s += ' '
    s += "world"
    return s
