# NOTE:
# - Newest first. Within a year keep the entries in descending date order;
#   tests/test_archive.py checks this for the whole list.
# - Bodies are trusted HTML written by the site maintainers. Relative links
#   point at the other pages of the website.
# - interpolated=True bodies are format templates; {top_synset_id} and
#   {top_synset_name} are filled from the configured taxonomy root.
# - Dates are ISO (YYYY-MM-DD) except for the very first entry, which only
#   ever had a month.

from .archive import NewsEntry

ENTRIES = (
    # --- 2009 ---------------------------------------------------------------
    NewsEntry(
        date="2009-02-20",
        body='Auf der Ergebnisseite wurde ein Link zu '
             '<a href="http://www.eyeplorer.com">eyeplorer.com</a> hinzugefügt',
    ),

    # --- 2008 ---------------------------------------------------------------
    NewsEntry(
        date="2008-12-22",
        body='Die Wikipedia-Links (im rechten Bereich auf der Seite mit den Suchergebnissen) '
             'wurden aktualisiert. Der Stand der Links entspricht der Wikipedia vom 2008-12-06.',
    ),
    NewsEntry(
        date="2008-11-23",
        body='OpenThesaurus enthält durch die starke Community-Beteiligung insbesondere '
             'in den letzten Wochen jetzt erstmals 50.000 Wörter. '
             'Das wurde auch als Anlass genommen, um der Homepage www.openthesaurus.de ein neues Design zu geben.',
    ),
    NewsEntry(
        date="2008-09-28",
        body='Im bald erscheinenden OpenOffice.org 3.0 werden Wörterbücher '
             'und Thesauri als Extensions installiert. Den jeweils tagesaktuellen OpenThesaurus '
             'gibt es deshalb unter "Download" jetzt auch als Extension, also im .oxt-Format. '
             'Die Installation erfolgt ganz einfach über das Menü in OpenOffice.org unter '
             '<em>Extras -&gt; Extension Manager</em>. Die alten Thesaurus-Dateiformate '
             'funktionieren in OpenOffice.org 3.0 übrigens nicht mehr.',
    ),
    NewsEntry(
        date="2008-08-09",
        body='Wer OpenThesaurus mit <a rel="nofollow" href="http://www.openoffice.org/">OpenOffice.org</a> '
             '3.0 beta nutzen möchte, braucht dazu '
             '<a rel="nofollow" href="http://extensions.services.openoffice.org/project/dict-de">diese Extension</a>, '
             'die auch das Wörterbuch für die deutsche Rechtschreibprüfung enthält.',
    ),
    NewsEntry(
        date="2008-04-08",
        body='Das kürzlich veröffentlichte '
             '<a href="http://download.openoffice.org/">OpenOffice.org 2.4</a> '
             'enthält leider einen recht alten Thesaurus. Über <em>Datei -&gt; Assistenten '
             '-&gt; Weitere Wörterbücher installieren...</em> kann man '
             'aber sehr einfach eine neue Version mit den aktuellen OpenThesaurus-Daten installieren.',
    ),
    NewsEntry(
        date="2008-03-15",
        body='Für Mac-User (ab Mac OS X 10.5) gibt es jetzt von Wolfgang Reszel '
             'ein <a href="http://www.tekl.de/deutsch/OpenThesaurus_Deutsch.html">Wörterbuch-Plugin</a>, '
             'mit dem man OpenThesaurus im Mac-Wörterbuch durchsuchen kann. '
             'Ein ähnliches Plugin gibt es von <a href="http://www.pindarsign.de/webblog/?p=57">Simon Dittlmann</a>.',
    ),

    # --- 2007 ---------------------------------------------------------------
    NewsEntry(
        date="2007-09-29",
        body='Ab sofort steht ein <a href="feed.xml">RSS-Feed</a> zur Verfügung, '
             'der alle Änderungen in den Thesaurus-Daten auflistet.',
    ),
    NewsEntry(
        date="2007-07-12",
        body='Ab jetzt sind auf der Ergebnis-Seite auch Links '
             'aus der Wikipedia integriert. Dabei handelt es sich nicht einfach um Synonyme, '
             'sondern um Wörter, die im Wikipedia-Artikel zum aktuellen Suchbegriff verlinkt '
             'sind. Damit eignet sich OpenThesaurus jetzt noch besser zum Auffinden von '
             'Assoziationen. Beispiele zum Ausprobieren: '
             '<a href="overview.php?word=Demokratie">Demokratie</a>, '
             '<a href="overview.php?word=Welt">Welt</a>, <a href="overview.php?word=Wald">Wald</a>',
    ),
    NewsEntry(
        date="2007-05-11",
        body='Mehr Einträge aus dem deutschen <a href="http://de.wiktionary.org">Wiktionary</a>: '
             'schon länger wird bei jeder Suche automatisch auch das Wiktionary durchsucht -- '
             'diese Daten wurden aktualisiert und umfassen jetzt über 21.000 '
             'deutsche Wörter, zusätzlich zu den über 41.000 Wörtern aus OpenThesaurus.',
    ),

    # --- 2006 ---------------------------------------------------------------
    NewsEntry(
        date="2006-09-25",
        body='Bessere Performance: Nach einem Umzug des Servers vor drei Wochen '
             'hatte die Geschwindigkeit von www.openthesaurus.de etwas nachgelassen. Durch '
             'Optimierungen an der Datenbank sollte die gesamte Website '
             'jetzt wieder deutlich schneller sein.',
    ),
    NewsEntry(
        date="2006-07-04",
        body='Das neue <a href="http://de.openoffice.org">OpenOffice.org</a> 2.0.3 enthält '
             'jetzt den deutschen OpenThesaurus, so dass keine nachträgliche Installation des Thesaurus '
             'mehr nötig ist.',
    ),
    NewsEntry(
        date="2006-06-11",
        body='Die für OpenOffice.org exportierten Dateien enthalten jetzt auch '
             'Antonyme, z.B. findet man bei der Suche nach <span class="bsp">Krieg</span> auch den '
             'Eintrag <span class="bsp">Frieden (Antonym)</span>. Da viele Wörter allerdings '
             'keine echten Antonyme haben, betrifft das insgesamt nur wenige Einträge.',
    ),
    NewsEntry(
        date="2006-03-17",
        body='OpenThesaurus steht ab sofort nicht mehr unter der '
             '<a href="http://www.gnu.org/copyleft/gpl.html">GPL</a> zu Verfügung, sondern '
             'unter der <a href="http://www.gnu.org/copyleft/lesser.html">LGPL</a>.',
    ),
    NewsEntry(
        date="2006-02-22",
        body='Der Datenexport für OpenOffice.org 2.x wurde so verbessert, dass jetzt auch Wörter gefunden werden '
             'die in Klammern Zusatzinformationen haben, z.B. <span class="bsp">Velo (schweiz.)</span>. Bisher '
             'wurde dieser Eintrag bei der Suche nach <span class="bsp">Velo</span> nicht gefunden, mit der '
             'aktuellen Version geht das jetzt. Insgesamt betrifft das ca. 1000 Wörter, '
             'ein Update (in OpenOffice.org über "Assistenten" -&gt; "Weitere Wörterbücher installieren") '
             'lohnt sich also. Siehe auch <a href="faq.php#ooo">den Eintrag in der FAQ</a>.',
    ),

    # --- 2005 ---------------------------------------------------------------
    NewsEntry(
        date="2005-04-18",
        body='Der Thesaurus für OpenOffice.org 2.0 beinhaltet ab jetzt auch Oberbegriffe. '
             'Außerdem sei noch auf die Seite <a href="background.php">Hintergrundinformationen</a> '
             'hingewiesen, auf der sich zwei Papers über OpenThesaurus befinden.',
    ),
    NewsEntry(
        date="2005-03-04",
        body='Passend zur <a href="http://download.openoffice.org/680/index.html">OpenOffice.org&nbsp;2.0 '
             'beta</a> gibt es jetzt hier auch den Thesaurus für OOo&nbsp;2.0 -- der alte Thesaurus '
             'funktioniert nämlich nicht mehr (und genauso läuft der neue nicht mit OpenOffice&nbsp;1.x). '
             'Hauptvorteil des neuen Thesaurus ist die Unterstützung mehrerer Bedeutungen pro Wort, '
             'z.&nbsp;B. findet <span class="bsp">Auflösung</span> jetzt die verschiedenen '
             'Bedeutungen (<span class="bsp">Auflösung</span> im Sinne von <span class="bsp">Antwort</span>, '
             'im Sinne von <span class="bsp">Granularität</span> etc) und zu '
             'diesen dann die Synonyme -- ähnlich wie hier auf der Website.',
    ),

    # --- 2004 ---------------------------------------------------------------
    NewsEntry(
        date="2004-09-27",
        body='Es stehen jetzt einige shortcuts ("access keys") zur Verfügung, so dass '
             'man Teile dieser Website über Tastaturkürzel bedienen kann: '
             '<a href="keys.php#korr">Liste der Tastaturkürzel</a>. Außerdem kann man jetzt '
             'auch auf den Text neben einer Checkbox klicken, um diese zu aktivieren '
             '(bisher musste man die Checkbox selber anklicken).',
    ),
    NewsEntry(
        date="2004-06-21",
        body='An die aktiven Teilnehmer: beachtet bitte die zwei kleinen '
             'Ergänzungen zum Thema regionale und veraltete Wörter '
             'in der <a href="faq.php#korr">FAQ</a>.',
    ),
    NewsEntry(
        date="2004-06-16",
        body='Umzug auf den neuen Server abgeschlossen.',
    ),
    NewsEntry(
        date="2004-04-07",
        body='Aus Geschwindigkeitsgründen kann die Datenbank-Statistik '
             'auf der Homepage nur noch alle 10 Minuten aktualisiert werden. Die '
             '<a href="top_users.php">Benutzer-Top10</a> wird weiterhin '
             'in Echtzeit aktualisiert.',
    ),
    NewsEntry(
        date="2004-04-04",
        body='OpenThesaurus ist jetzt unter der Domain '
             '<span style="color:#666666;font-weight:bold">www.openthesaurus.de</span> '
             'zu erreichen.',
    ),
    NewsEntry(
        date="2004-03-31",
        body='Neues Feature: <a href="top_users.php">Benutzer-Top10</a> '
             '-- listet die Top 15 der Benutzer, die in den letzten 7 bzw. 365 Tagen '
             'die meisten Beiträge geleistet haben. Aus Datenschutzgründen '
             'muss man als Benutzer erst auf der Seite <a href="prefs.php">Einstellungen</a> '
             'seinen Namen (oder ein Pseudonym) angeben, sonst erscheint '
             'der eigene Eintrag nur als "anonym".',
    ),
    NewsEntry(
        date="2004-01-12",
        body='Es gibt jetzt es eine Mailingliste '
             'für Diskussionen und Announcements zu OpenThesaurus: '
             '<a href="http://lists.berlios.de/mailman/listinfo/openthesaurus-discuss#sub">Hier eintragen</a>',
    ),
    NewsEntry(
        date="2004-01-06",
        body='Es stehen ab sofort auch einzelne '
             'Begriffe in den Daten, also Wörter ohne Synonyme. Das hat seine '
             'Richtigkeit, denn es wird jetzt eine Begriffshierarchie aufgebaut. '
             'Oberster Begriff, der alle anderen Nomen umfasst, ist '
             '<a href="synset.php?id={top_synset_id}">{top_synset_name}</a>. '
             'Mehr dazu in der <a href="faq.php#hierarchie">FAQ</a>.',
        interpolated=True,
    ),

    # --- 2003 ---------------------------------------------------------------
    NewsEntry(
        date="2003-11-06",
        body='<a href="download/openthesaurus.pdf">An '
             'English language paper about OpenThesaurus (PDF, 266 KB)</a> is now available. '
             '<br />Update 2004-06-13: the paper has been slightly updated.',
    ),
    NewsEntry(
        date="2003-10-18",
        body='OpenThesaurus wird jetzt '
             'auch mit <a href="http://www.suse.de/de/private/products/suse_linux/i386/">Suse Linux 9.0</a> '
             'mitgeliefert und automatisch '
             'zusammen mit OpenOffice.org installiert. Wer die aktuellste '
             'OpenThesaurus-Version nutzen möchte, kann natürlich weiterhin die ZIP-Datei '
             'von dieser Website runterladen und die vorhandenen Dateien '
             'einfach überspielen. Damit man sehen kann, wieviel '
             'geändert wurde, habe ich die Datenbank-Statistik verbessert: '
             'Es wird jetzt angezeigt, wieviele Wörter in den letzten '
             '7 Tagen hinzugefügt wurden.',
    ),
    NewsEntry(
        date="2003-09-26",
        body='Als eingeloggter User '
             'kann man ab jetzt in einer Synonymgruppe auf die '
             'einzelnen Wörter klicken, um ihren Status auf z.B. '
             '"umgangssprachlich" zu setzen. Ab sofort sind diese '
             'Informationen über die Benutzung von Wörtern auch Teil '
             'des OpenOffice.org-Thesaurus.',
    ),
    NewsEntry(
        date="2003-09-16",
        body='Ab sofort kann man auch '
             'nach flektierten Wörtern suchen. Zum Beispiel wird bei der Suche '
             'nach <span class="bsp">gehst</span> oder <span class="bsp">ging</span> '
             'jetzt automatisch eine Suche nach <span class="bsp">gehen</span> '
             'vorgeschlagen.',
    ),
    NewsEntry(
        date="2003-09-12",
        body='Das Suchen nach Wörtern sollte '
             'jetzt auch funktionieren, wenn man Cookies deaktiviert hat. Meldet Euch, falls '
             'das nicht klappt. (Nur zum Login sind weiter Cookies nötig.)',
    ),
    NewsEntry(
        date="2003-09-10",
        body='Es ist jetzt kein Login als '
             '"guest" mehr nötig, wenn man nur nach Begriffen suchen will. Wie '
             'bisher muss man sich einloggen, um Begriffe einzufügen oder '
             'zu löschen. Übrigens: unter <a href="prefs.php">Einstellungen</a> kann '
             'man dann auch sein Passwort ändern und eine persönliche Statistik '
             'der hinzugefügten/gelöschten Einträge abrufen.',
    ),
    NewsEntry(
        date="März 2003",
        body='OpenThesaurus geht online.',
    ),
)
