class Connection:
    def __init__(self, signal, callback):
        self._signal = signal
        self.callback = callback
        self.connected = True

    def disconnect(self):
        if self.connected:
            self._signal._connections.remove(self)
            self.connected = False


class Signal:
    """Synchronous callback list, fired on the UI thread."""

    def __init__(self):
        self._connections = []

    def connect(self, callback):
        connection = Connection(self, callback)
        self._connections.append(connection)
        return connection

    def fire(self, *args):
        # Copy so callbacks can disconnect while firing
        for connection in list(self._connections):
            if connection.connected:
                connection.callback(*args)

    def __len__(self):
        return len(self._connections)
