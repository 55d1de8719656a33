import io
import unittest

from glambda.output import (
	Console, Document, Printable, SILENCE, Silence,
	classify, hang, render,
)

class FormatterTests(unittest.TestCase):

	def test_document_renders_verbatim(self):
		doc = Document(["one", "  two"])
		self.assertIs(doc, classify(doc))
		self.assertEqual("one\n  two", render(doc))

	def test_silence_renders_nothing(self):
		self.assertIs(SILENCE, classify(SILENCE))
		self.assertIsNone(render(SILENCE))
		self.assertIsNone(render(Silence()))
		self.assertIsNone(render(None))

	def test_anything_else_is_printable(self):
		self.assertIsInstance(classify(42), Printable)
		self.assertEqual("42", render(42))
		self.assertEqual("hello", render("hello"))
		self.assertEqual("[1, 2]", render([1, 2]))

	def test_an_empty_document_is_still_a_document(self):
		# An empty document prints an empty line; silence prints nothing at all.
		self.assertEqual("", render(Document([])))
		self.assertEqual("", render(Document([""])))

	def test_printable_wrapper_is_unwrapped_once(self):
		self.assertEqual("x", render(Printable("x")))

	def test_hang(self):
		doc = hang("Possibilities:", 2, ["a", "b"])
		self.assertEqual(["Possibilities:", "  a", "  b"], doc.lines)

	def test_console_skips_silence(self):
		dest = io.StringIO()
		console = Console(dest)
		console.say(SILENCE)
		console.say(Document(["shown"]))
		console.say(7)
		self.assertEqual("shown\n7\n", dest.getvalue())


if __name__ == '__main__':
	unittest.main()
