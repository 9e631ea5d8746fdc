# быстрый смоук без сети: локальный рендер .docx через ядро
import tempfile

from reportdesk import RequestBuilder
from reportdesk.transport import LocalDocumentTransport

built = RequestBuilder().build("P&L", 2025, "Acme Corporation")
out = LocalDocumentTransport(tempfile.mkdtemp()).submit(built.data)

print(out.download_url)
