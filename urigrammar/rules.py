"""RFC 3986 grammar, one pattern per ABNF rule

Runs of characters are atomic: their longest match is the only one the next
rule can accept, so committing to it loses nothing and keeps matching linear.
The host keeps its backtracking, a dotted quad that can't end the authority
falls back to reg-name.
"""

from string import ascii_letters, digits, hexdigits

from .pattern import P


# ALPHA = %x41-5A / %x61-7A
ALPHA = P.ic(ascii_letters)

# DIGIT = %x30-39
DIGIT = P.ic(digits)

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
HEXDIG = P.ic(hexdigits)

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
GEN_DELIMS = P.ic(':/?#[]@')

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS = P.ic("!$&'()*+,;=")

# reserved = gen-delims / sub-delims
RESERVED = P.any(GEN_DELIMS, SUB_DELIMS)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = P.ic(ascii_letters + digits + '-._~')

# pct-encoded = "%" HEXDIG HEXDIG
PCT_ENCODED = '%' + P.n(HEXDIG, exact=2)

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
PCHAR = P.any(UNRESERVED, PCT_ENCODED, SUB_DELIMS, P.ic(':@'))


# segment = *pchar
SEGMENT = P.atomic(P.n(PCHAR))

# segment-nz = 1*pchar
SEGMENT_NZ = P.atomic(P.n(PCHAR, 1))

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
SEGMENT_NZ_NC = P.atomic(P.n(P.any(UNRESERVED, PCT_ENCODED, SUB_DELIMS, '@'), 1))

# path-abempty = *( "/" segment )
PATH_ABEMPTY = P.atomic(P.n('/' + SEGMENT))

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
PATH_ABSOLUTE = P.atomic('/' + P.n01(SEGMENT_NZ + P.n('/' + SEGMENT)))

# path-rootless = segment-nz *( "/" segment )
PATH_ROOTLESS = P.atomic(SEGMENT_NZ + P.n('/' + SEGMENT))

# path-empty = 0<pchar>
PATH_EMPTY = P.pattern('')


# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
DEC_OCTET = P.uint(3, 255)

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4ADDRESS = DEC_OCTET + P.n('.' + DEC_OCTET, exact=3)

# h16 = 1*4HEXDIG
H16 = P.atomic(P.n(HEXDIG, 1, 4))

# ls32 = ( h16 ":" h16 ) / IPv4address
LS32 = P.any(H16 + ':' + H16, IPV4ADDRESS)


def h16_colon(n: int):
    """n( h16 ":" )"""
    return P.n(H16 + ':', exact=n)


def compressed_head(n: int):
    """[ *n( h16 ":" ) h16 ], the groups before "::" """
    return P.n01(P.n(H16 + ':', 0, n) + H16)


# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"
IPV6ADDRESS = P.atomic(P.any(
                                    h16_colon(6) + LS32,
                             '::' + h16_colon(5) + LS32,
          P.n01(H16)         + '::' + h16_colon(4) + LS32,
          compressed_head(1) + '::' + h16_colon(3) + LS32,
          compressed_head(2) + '::' + h16_colon(2) + LS32,
          compressed_head(3) + '::' + h16_colon(1) + LS32,
          compressed_head(4) + '::'                + LS32,
          compressed_head(5) + '::'                + H16,
          compressed_head(6) + '::',
))

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPVFUTURE = 'v' + P.atomic(P.n(HEXDIG, 1)) + '.' \
    + P.atomic(P.n(P.any(UNRESERVED, SUB_DELIMS, ':'), 1))

# IP-literal = "[" ( IPv6address / IPvFuture ) "]"
IP_LITERAL = '[' + P.any(P.tag(IPV6ADDRESS, 'ipv6address'), P.tag(IPVFUTURE, 'ipvfuture')) + ']'

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME = P.atomic(P.n(P.any(UNRESERVED, PCT_ENCODED, SUB_DELIMS)))

# host = IP-literal / IPv4address / reg-name
# the first alternative that matches is final, whatever follows the host
HOST = P.atomic(P.any(
    P.tag(IP_LITERAL, 'ip_literal'),
    P.tag(IPV4ADDRESS, 'ipv4address'),
    P.tag(REG_NAME, 'reg_name'),
))

# port = *DIGIT
PORT = P.atomic(P.n(DIGIT))


# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME = P.atomic(ALPHA + P.n(P.any(ALPHA, DIGIT, P.ic('+-.'))))

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USER_INFO = P.atomic(P.n(P.any(UNRESERVED, PCT_ENCODED, SUB_DELIMS, ':')))

# authority = [ userinfo "@" ] host [ ":" port ]
AUTHORITY = P.n01(P.tag(USER_INFO, 'user_info') + '@') \
    + P.tag(HOST, 'host') \
    + P.n01(':' + P.tag(PORT, 'port'))

# hier-part = "//" authority path-abempty / path-absolute / path-rootless / path-empty
HIER_PART = P.any(
    '//' + P.tag(AUTHORITY, 'authority') + P.tag(PATH_ABEMPTY, 'path'),
    P.tag(P.any(PATH_ABSOLUTE, PATH_ROOTLESS, PATH_EMPTY), 'path'),
)

# query = *( pchar / "/" / "?" )
QUERY = P.atomic(P.n(P.any(PCHAR, P.ic('/?'))))

# fragment = *( pchar / "/" / "?" )
FRAGMENT = P.atomic(P.n(P.any(PCHAR, P.ic('/?'))))

# URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
URI = P.tag(SCHEME, 'scheme') + ':' + HIER_PART \
    + P.n01('?' + P.tag(QUERY, 'query')) \
    + P.n01('#' + P.tag(FRAGMENT, 'fragment'))
