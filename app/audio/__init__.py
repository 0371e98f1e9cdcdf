"""
Microphone level sampling.

- `level`: pure decibel -> display amplitude mapping
- `meter`: the `sounddevice` input-stream backend
- `monitor`: the polling loop that keeps a rolling window of levels
"""
