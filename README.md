# notifyhub

Send one message to several channels at once (Telegram chats and e-mail
recipients) and get a result back for each channel.

## Install

```
pip install notifyhub
```

For running the tests:

```
pip install "notifyhub[test]"
pytest
```

## Configuration

Integrations are described in a YAML file. Each channel maps an
integration key to its settings:

```yaml
telegram:
  alerts:
    token: token
email:
  ops:
    host: smtp.example.com
    port: 465
    username: alerts@example.com
    password: password
```

Load it with `notifyhub.config.load`, which returns a `Config` holding
`telegram` (a dict of `TelegramConfig`) and `email` (a dict of
`EmailConfig`):

```python
from notifyhub.config import load

cfg = load("configs/integrations.yaml")
```

Missing fields default to empty strings (and `0` for `port`). `load`
raises `OSError` if the file cannot be read, `yaml.YAMLError` if it is not
valid YAML, and `ValueError` if its structure does not fit, for example a
section that is not a mapping or a `port` that is not an integer.

## Sending notifications

```python
from notifyhub.config import load
from notifyhub.logger import SimpleLogger
from notifyhub.notifier import TelegramNotifier, EmailNotifier
from notifyhub.task_queue import InMemoryQueue
from notifyhub.usecase import NotificationUseCase, ChannelNotification

cfg = load("configs/integrations.yaml")
logger = SimpleLogger()

notifiers = {
    "telegram": TelegramNotifier(cfg.telegram, logger),
    "email": EmailNotifier(cfg.email, logger),
}
use_case = NotificationUseCase(notifiers, InMemoryQueue(logger), logger)

results = use_case.send_notification_multi(
    [
        ChannelNotification(channel="telegram", integration_key="alerts", receivers=["123"]),
        ChannelNotification(channel="email", integration_key="ops", receivers=["team@example.com"]),
    ],
    "Deployment finished",
)
for result in results:
    print(result.channel, result.success, result.error_message)
```

Every requested channel yields one `ChannelResult`, in request order. A
channel with no registered notifier gives `channel <name> not supported`;
an unknown integration key or a failed delivery gives the notifier's error
message. None of these is raised from `send_notification_multi`.

Each notifier's `send` raises `notifyhub.notifier.NotifierError` on
failure:

- `TelegramNotifier` posts to the Bot API's `sendMessage`, one request per
  receiver, and stops at the first receiver that fails: a transport error,
  a status other than 200, a body that is not a JSON object, or a reply
  whose `ok` is not true.
- `EmailNotifier` sends one plain-text message to all receivers over SMTP
  with implicit TLS. It always connects on port 465 (the configured `port`
  is not used), logs in with the integration's username and password, uses
  the username as the sender and `Notification` as the subject.

## Request handling

`notifyhub.handler.NotificationHandler` takes a `SendNotificationRequest`
(a `message` plus a list of `NotificationItem`s, each with `channel`,
`integration_key` and `receivers`), passes it to the use case, logs each
channel's outcome, and returns a `SendNotificationResponse` whose
`results` are the per-channel `ChannelResult`s.

```python
from notifyhub.handler import NotificationHandler, NotificationItem, SendNotificationRequest

handler = NotificationHandler(use_case, logger)
response = handler.send_notification(
    SendNotificationRequest(
        notifications=[NotificationItem("telegram", "alerts", ["123"])],
        message="Deployment finished",
    )
)
```

## Logging

`notifyhub.logger.SimpleLogger(out=None, err=None)` writes lines of the
form `INFO: 2024/01/31 12:00:00 file.py:42: message`. Info and debug lines
go to `out`, error lines to `err`; without them, the current `sys.stdout`
and `sys.stderr` are used. Any object with `info`, `error` and `debug`
methods can stand in for it (the `Logger` protocol).

## Queue

`notifyhub.task_queue.InMemoryQueue(logger, maxsize=1000)` is a bounded
queue of `NotificationTask`s. When it is full, `enqueue` drops the task,
logs an error and passes a `QueueFullError` to the task's callback, if it
has one. `start_worker(stop_event)` takes tasks off the queue until the
given `threading.Event` is set, logging each one and pausing
`processing_delay` seconds (0.1 by default) per task.

## What this package does not do

- It has no network server and no command: `NotificationHandler` is a
  plain Python object that you call yourself, to be wired into whatever
  transport you use.
- The queue worker does not deliver tasks; it only takes them off the
  queue. `NotificationUseCase` keeps the queue it is given but sends
  directly through the notifiers and never enqueues anything.