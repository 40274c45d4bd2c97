# Log event names
KEY_GENERATED = 'KEY_GENERATED'
PING = 'PING'
GENERATOR_UNAVAILABLE = 'GENERATOR_UNAVAILABLE'
COUNTER_UNAVAILABLE = 'COUNTER_UNAVAILABLE'
KEY_SPACE_EXHAUSTED = 'KEY_SPACE_EXHAUSTED'
RANDOM_SOURCE_FAILURE = 'RANDOM_SOURCE_FAILURE'

# Seconds clients should wait before retrying after a counter outage
COUNTER_RETRY_AFTER = 1
