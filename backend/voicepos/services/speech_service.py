"""
Speech capture collaborator.

A capture delivers at most one final transcript per session through
on_transcript, or reports a failure through on_error, and always finishes
with on_end. VoiceCommandSession feeds that transcript into the same
process_command() path used for typed input. Nothing here touches the
store directly, and a failed or stopped session has no store effect.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional

from ..errors import RecognitionError, SpeechError, UnsupportedCapabilityError

TranscriptCallback = Callable[[str], None]
ErrorCallback = Callable[[SpeechError], None]
EndCallback = Callable[[], None]


class SpeechCapture:
    """Interface for a platform speech recognizer."""

    def start(self, on_transcript: TranscriptCallback, on_error: ErrorCallback, on_end: EndCallback) -> None:
        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError


class RecognizerCapture(SpeechCapture):
    """
    Microphone capture backed by the SpeechRecognition package.

    Listens for a single phrase in the background and sends it to the
    Google Web Speech recognizer. Raises UnsupportedCapabilityError from
    start() when the package or a microphone (PyAudio) is not available.
    """

    def __init__(self, language: str = "bn-BD", phrase_time_limit: float = 8.0):
        self.language = language
        self.phrase_time_limit = phrase_time_limit
        self._stopper = None

    def _load_backend(self):
        try:
            import speech_recognition as sr
        except ImportError as exc:
            raise UnsupportedCapabilityError(
                "Speech recognition is not supported here. Please type your command instead."
            ) from exc
        return sr

    def start(self, on_transcript, on_error, on_end) -> None:
        sr = self._load_backend()
        recognizer = sr.Recognizer()
        try:
            microphone = sr.Microphone()
            with microphone as source:
                recognizer.adjust_for_ambient_noise(source)
        except (AttributeError, OSError) as exc:
            raise UnsupportedCapabilityError("No usable microphone found") from exc

        def _callback(rec, audio):
            try:
                text = rec.recognize_google(audio, language=self.language)
            except sr.UnknownValueError:
                on_error(RecognitionError("Speech was not understood"))
            except sr.RequestError as exc:
                on_error(RecognitionError(f"Recognition service failed: {exc}"))
            else:
                on_transcript(text)
            finally:
                self.stop()
                on_end()

        self._stopper = recognizer.listen_in_background(
            microphone, _callback, phrase_time_limit=self.phrase_time_limit
        )

    def stop(self) -> None:
        if self._stopper is not None:
            # Never join here: stop() is also called from the listener thread.
            self._stopper(wait_for_stop=False)
            self._stopper = None


class VoiceCommandSession:
    """
    One listening session: start -> (transcript | error) -> end.

    Only the first non-empty transcript is submitted. Errors, empty results
    and an unsupported platform are reported through on_notice.
    """

    def __init__(
        self,
        capture: SpeechCapture,
        *,
        app=None,
        submit: Optional[Callable] = None,
        on_notice: Optional[Callable[[SpeechError], None]] = None,
        on_processed: Optional[Callable] = None,
    ):
        if submit is None:
            from .command_service import process_command
            submit = process_command
        self.capture = capture
        self.app = app
        self.submit = submit
        self.on_notice = on_notice
        self.on_processed = on_processed

        self.listening = False
        self.transcript: Optional[str] = None
        self.transaction = None
        self._lock = threading.Lock()
        self._closed = False

    def _notify(self, error: SpeechError) -> None:
        if self.on_notice is not None:
            self.on_notice(error)

    def start(self) -> bool:
        try:
            self.capture.start(self._on_transcript, self._on_error, self._on_end)
        except UnsupportedCapabilityError as exc:
            self._notify(exc)
            return False
        self.listening = True
        return True

    def stop(self) -> None:
        """Cancel before a transcript arrives; anything later is discarded."""
        with self._lock:
            self._closed = True
        self.capture.stop()
        self.listening = False

    def _submit(self, text: str) -> dict:
        # Serialize inside the app context; rows expire once it is torn down.
        if self.app is not None:
            with self.app.app_context():
                return self.submit(text).to_dict()
        return self.submit(text).to_dict()

    def _on_transcript(self, text: str) -> None:
        with self._lock:
            if self._closed:
                return
            if not text or not text.strip():
                self._notify(RecognitionError("No speech was captured"))
                return
            self._closed = True
            self.transcript = text

        self.transaction = self._submit(text)
        if self.on_processed is not None:
            self.on_processed(self.transaction)

    def _on_error(self, error: SpeechError) -> None:
        with self._lock:
            if self._closed:
                return
        self._notify(error)

    def _on_end(self) -> None:
        self.listening = False
