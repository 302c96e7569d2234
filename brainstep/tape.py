class Tape:
    """Unbounded row of 8-bit cells.

    Storage is materialized lazily: moving the head past either edge inserts
    zero cells at that edge. `origin` follows the cell the head started on,
    so positions can be reported relative to it after the tape grows left.
    """

    def __init__(self):
        self.data = bytearray(1)
        self.head = 0
        self.origin = 0

    def __len__(self):
        return len(self.data)

    @property
    def cells(self):
        return bytes(self.data)

    @property
    def position(self):
        return self.head - self.origin

    def add(self, delta=1):
        self.data[self.head] = (self.data[self.head] + delta) % 256

    def subtract(self, delta=1):
        self.add(-delta)

    def shift_right(self, n=1):
        missing = self.head + n - len(self.data) + 1
        if missing > 0:
            self.data.extend(bytes(missing))
        self.head += n

    def shift_left(self, n=1):
        missing = n - self.head
        if missing > 0:
            # inserting at the front moves every existing cell up
            self.data[0:0] = bytes(missing)
            self.head += missing
            self.origin += missing
        self.head -= n

    def read(self):
        return self.data[self.head]

    def write(self, value):
        self.data[self.head] = value

    def __repr__(self):
        return 'Tape(head={}, origin={}, data={})'.format(self.head, self.origin, list(self.data))
